"""
Provider data models for deckhand.

Defines the message, streaming and usage types exchanged with the
model provider.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MessageRole(str, Enum):
    """Valid message roles."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass
class Message:
    """Conversation message in the provider's chat format."""

    role: str  # "system" | "user" | "assistant" | "tool"
    content: str | None
    tool_calls: list[dict[str, Any]] | None = None  # assistant tool requests
    tool_call_id: str | None = None  # tool results only
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to LiteLLM-compatible dict."""
        result: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            result["tool_calls"] = self.tool_calls
        if self.tool_call_id:
            result["tool_call_id"] = self.tool_call_id
        if self.name:
            result["name"] = self.name
        return result

    @classmethod
    def system(cls, content: str) -> "Message":
        """Create a system message."""
        return cls(role=MessageRole.SYSTEM.value, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        """Create a user message."""
        return cls(role=MessageRole.USER.value, content=content)

    @classmethod
    def assistant(cls, content: str, tool_calls: list[dict[str, Any]] | None = None) -> "Message":
        """Create an assistant message, optionally carrying tool calls."""
        return cls(
            role=MessageRole.ASSISTANT.value,
            content=(content or None) if tool_calls else content,
            tool_calls=tool_calls,
        )

    @classmethod
    def tool(cls, tool_call_id: str, name: str, content: str) -> "Message":
        """Create a tool result message."""
        return cls(
            role=MessageRole.TOOL.value,
            content=content,
            tool_call_id=tool_call_id,
            name=name,
        )


@dataclass
class TokenUsage:
    """Token usage statistics."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        """Input plus output tokens."""
        return self.input_tokens + self.output_tokens

    def add(self, other: "TokenUsage") -> None:
        """Accumulate another usage report into this one."""
        self.input_tokens += other.input_tokens
        self.output_tokens += other.output_tokens


@dataclass
class ToolCallDelta:
    """Fragment of a tool call streamed by the provider."""

    index: int = 0
    id: str | None = None
    name: str | None = None
    arguments: str = ""


@dataclass
class StreamChunk:
    """Single chunk from streaming response."""

    content: str = ""
    tool_call_deltas: list[ToolCallDelta] = field(default_factory=list)
    usage: TokenUsage | None = None
    finish_reason: str | None = None
    model: str | None = None
