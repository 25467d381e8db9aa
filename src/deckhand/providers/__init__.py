"""
deckhand provider layer.

Streams model output via LiteLLM:
- Text and tool-call fragments as StreamChunk objects
- Token usage reported at the end of each completion
- Transport failures wrapped into ProviderError
"""

from deckhand.providers.exceptions import (
    AuthenticationError,
    ContextLengthExceededError,
    FailureType,
    InvalidRequestError,
    NetworkError,
    ProviderError,
    RateLimitError,
    ServerError,
    classify_error,
    wrap_provider_error,
)
from deckhand.providers.manager import ProviderManager
from deckhand.providers.models import (
    Message,
    MessageRole,
    StreamChunk,
    TokenUsage,
    ToolCallDelta,
)

__all__ = [
    # Manager
    "ProviderManager",
    # Models
    "Message",
    "MessageRole",
    "StreamChunk",
    "TokenUsage",
    "ToolCallDelta",
    # Exceptions
    "ProviderError",
    "AuthenticationError",
    "RateLimitError",
    "ContextLengthExceededError",
    "NetworkError",
    "ServerError",
    "InvalidRequestError",
    "FailureType",
    "classify_error",
    "wrap_provider_error",
]
