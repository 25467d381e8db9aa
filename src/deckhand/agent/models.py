"""Data models for agent execution."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from deckhand.config.schema import DEFAULT_SYSTEM_PROMPT
from deckhand.providers.models import TokenUsage


class AgentConfig(BaseModel):
    """Configuration for agent execution."""

    max_turns: int = Field(
        default=100,
        ge=1,
        description="Maximum model turns per user turn",
    )

    system_prompt: Optional[str] = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System prompt sent ahead of the conversation (None = omit)",
    )

    model: Optional[str] = Field(
        default=None,
        description="Model override (None = provider default)",
    )


class EventType(str, Enum):
    """Agent execution event types for streaming."""

    TEXT = "text"  # Text delta from the model
    TOOL_CALL = "tool_call"  # Model requested a tool
    TOOL_RESULT = "tool_result"  # Tool finished
    FINAL_RESPONSE = "final_response"  # Model answered without tools
    ERROR = "error"  # Provider failure or turn cap reached


class AgentEvent(BaseModel):
    """Event emitted during agent execution for streaming updates."""

    event_type: EventType = Field(description="Type of event")

    text: str = Field(
        default="",
        description="Text delta (TEXT) or full response text (FINAL_RESPONSE)",
    )

    tool_name: Optional[str] = Field(
        default=None,
        description="Tool name (for tool events)",
    )

    tool_call_id: Optional[str] = Field(
        default=None,
        description="Tool call ID (for tool events)",
    )

    usage: Optional[TokenUsage] = Field(
        default=None,
        description="Token usage summed across model turns (FINAL_RESPONSE)",
    )

    message: Optional[str] = Field(
        default=None,
        description="Human-readable message (error text for ERROR)",
    )

    @classmethod
    def error(cls, message: str) -> "AgentEvent":
        """Build an ERROR event."""
        return cls(event_type=EventType.ERROR, message=message)
