"""
Provider exceptions for deckhand.

Transport failures from the model provider are classified and wrapped
into these types so the conversation engine can report them uniformly.
No failure is retried.
"""

from enum import Enum

from litellm import exceptions as litellm_exceptions


class FailureType(Enum):
    """Classification of provider failures."""

    RATE_LIMIT = "rate_limit"
    AUTH_ERROR = "auth_error"
    NETWORK_ERROR = "network_error"
    SERVER_ERROR = "server_error"
    CONTEXT_LENGTH = "context_length"
    INVALID_REQUEST = "invalid_request"
    UNKNOWN = "unknown"


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class AuthenticationError(ProviderError):
    """API key invalid or missing."""


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""


class ContextLengthExceededError(ProviderError):
    """Request exceeded the model's context length."""


class NetworkError(ProviderError):
    """Network-related error (connection, timeout, etc.)."""


class ServerError(ProviderError):
    """Provider server error (5xx status codes)."""


class InvalidRequestError(ProviderError):
    """Invalid request sent to provider."""


_ERROR_TYPES: dict[FailureType, type[ProviderError]] = {
    FailureType.RATE_LIMIT: RateLimitError,
    FailureType.AUTH_ERROR: AuthenticationError,
    FailureType.NETWORK_ERROR: NetworkError,
    FailureType.SERVER_ERROR: ServerError,
    FailureType.CONTEXT_LENGTH: ContextLengthExceededError,
    FailureType.INVALID_REQUEST: InvalidRequestError,
    FailureType.UNKNOWN: ProviderError,
}


def classify_error(error: Exception) -> FailureType:
    """
    Classify an exception into a failure type.

    Args:
        error: The exception to classify.

    Returns:
        The failure type classification.
    """
    # Our own exceptions first
    for failure_type, error_type in _ERROR_TYPES.items():
        if error_type is not ProviderError and isinstance(error, error_type):
            return failure_type

    if isinstance(error, litellm_exceptions.RateLimitError):
        return FailureType.RATE_LIMIT
    if isinstance(error, litellm_exceptions.AuthenticationError):
        return FailureType.AUTH_ERROR
    if isinstance(error, litellm_exceptions.ContextWindowExceededError):
        return FailureType.CONTEXT_LENGTH
    if isinstance(
        error,
        (
            litellm_exceptions.APIConnectionError,
            litellm_exceptions.ServiceUnavailableError,
            litellm_exceptions.Timeout,
        ),
    ):
        return FailureType.NETWORK_ERROR
    if isinstance(error, litellm_exceptions.InternalServerError):
        return FailureType.SERVER_ERROR
    if isinstance(error, litellm_exceptions.BadRequestError):
        return FailureType.INVALID_REQUEST
    if isinstance(error, litellm_exceptions.APIError):
        status = getattr(error, "status_code", None)
        if status and 500 <= status < 600:
            return FailureType.SERVER_ERROR
        if status and 400 <= status < 500:
            return FailureType.INVALID_REQUEST
        return FailureType.UNKNOWN

    if isinstance(error, (ConnectionError, TimeoutError)):
        return FailureType.NETWORK_ERROR

    return FailureType.UNKNOWN


def wrap_provider_error(error: Exception, provider: str | None = None) -> ProviderError:
    """
    Convert an arbitrary provider exception into a ProviderError.

    Errors that already are ProviderErrors are returned unchanged.

    Args:
        error: The exception raised while talking to the provider.
        provider: Provider name, if known.

    Returns:
        The matching ProviderError subclass instance.
    """
    if isinstance(error, ProviderError):
        return error
    error_type = _ERROR_TYPES[classify_error(error)]
    return error_type(str(error) or error.__class__.__name__, provider=provider)
