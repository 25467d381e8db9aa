"""
Provider manager for deckhand.

Streams chat completions with tool definitions through LiteLLM and
normalizes the provider's chunks into StreamChunk objects.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

import litellm
from litellm import acompletion

from deckhand.config.schema import ProviderConfig
from deckhand.providers.exceptions import ProviderError, wrap_provider_error
from deckhand.providers.models import StreamChunk, TokenUsage, ToolCallDelta

logger = logging.getLogger(__name__)

# Drop params a given provider does not support instead of failing
litellm.drop_params = True


class ProviderManager:
    """
    Streams completions from the configured model via LiteLLM.

    Credentials are read by LiteLLM from the provider's usual environment
    variables. Failures are wrapped into ProviderError and never retried.
    """

    def __init__(self, config: ProviderConfig):
        """
        Initialize the provider manager.

        Args:
            config: Provider configuration.
        """
        self.config = config
        self._session_default: str | None = None

    def resolve_model(self, model: str | None) -> str:
        """
        Resolve model name from alias or default.

        Args:
            model: Model name, alias, or None for default.

        Returns:
            The fully resolved model identifier.
        """
        if model is None or model == "default":
            if self._session_default:
                return self._session_default
            model = self.config.default

        if model in self.config.aliases:
            resolved = self.config.aliases[model]
            logger.debug(f"Resolved alias '{model}' to '{resolved}'")
            return resolved

        return model

    def set_default_model(self, model: str) -> None:
        """Override the default model for the rest of the session."""
        self._session_default = self.resolve_model(model)
        logger.info(f"Default model set to: {self._session_default}")

    def get_current_model(self) -> str:
        """Get the currently active model."""
        return self.resolve_model(None)

    def _extract_provider(self, model: str) -> str:
        """Extract provider name from model string."""
        if "/" in model:
            return model.split("/")[0]
        return "unknown"

    def build_request(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
    ) -> dict[str, Any]:
        """
        Build the keyword arguments for a streaming LiteLLM request.

        Args:
            messages: Conversation messages in LiteLLM format.
            tools: Tool descriptors (``name``, ``description``, ``parameters``).
            model: Model to use (name, alias, or None for default).

        Returns:
            Request keyword arguments.
        """
        request_kwargs: dict[str, Any] = {
            "model": self.resolve_model(model),
            "messages": messages,
            "stream": True,
            "stream_options": {"include_usage": True},
            "max_tokens": self.config.max_tokens,
        }
        if self.config.temperature is not None:
            request_kwargs["temperature"] = self.config.temperature
        if tools:
            request_kwargs["tools"] = [
                {"type": "function", "function": tool} for tool in tools
            ]
        return request_kwargs

    async def stream(
        self,
        messages: list[dict[str, Any]],
        *,
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
    ) -> AsyncIterator[StreamChunk]:
        """
        Stream a completion.

        Args:
            messages: Conversation messages in LiteLLM format.
            tools: Tool descriptors offered to the model.
            model: Model to use (name, alias, or None for default).

        Yields:
            StreamChunk for each text, tool-call or usage chunk.

        Raises:
            ProviderError: On any transport or provider failure.
        """
        request_kwargs = self.build_request(messages, tools, model)
        resolved_model = request_kwargs["model"]
        provider = self._extract_provider(resolved_model)
        logger.info(f"Streaming completion with model: {resolved_model}")

        try:
            response = await acompletion(**request_kwargs)
            async for chunk in response:  # type: ignore[union-attr]
                parsed = self._parse_chunk(chunk, resolved_model)
                if parsed is not None:
                    yield parsed
        except ProviderError:
            raise
        except Exception as e:
            logger.error(f"Provider error from {resolved_model}: {e}")
            raise wrap_provider_error(e, provider) from e

    def _parse_chunk(self, chunk: Any, model: str) -> StreamChunk | None:
        """Parse a LiteLLM streaming chunk into a StreamChunk."""
        usage = None
        raw_usage = getattr(chunk, "usage", None)
        if raw_usage:
            usage = TokenUsage(
                input_tokens=getattr(raw_usage, "prompt_tokens", 0) or 0,
                output_tokens=getattr(raw_usage, "completion_tokens", 0) or 0,
            )

        choices = getattr(chunk, "choices", None)
        if not choices:
            return StreamChunk(usage=usage, model=model) if usage else None

        choice = choices[0]
        delta = getattr(choice, "delta", None)
        content = getattr(delta, "content", None) or ""

        tool_call_deltas = []
        for tool_call in getattr(delta, "tool_calls", None) or []:
            function = getattr(tool_call, "function", None)
            tool_call_deltas.append(
                ToolCallDelta(
                    index=getattr(tool_call, "index", None) or 0,
                    id=getattr(tool_call, "id", None),
                    name=getattr(function, "name", None),
                    arguments=getattr(function, "arguments", None) or "",
                )
            )

        finish_reason = getattr(choice, "finish_reason", None)
        if not content and not tool_call_deltas and usage is None and finish_reason is None:
            return None

        return StreamChunk(
            content=content,
            tool_call_deltas=tool_call_deltas,
            usage=usage,
            finish_reason=finish_reason,
            model=model,
        )
