"""Data models for tool use system."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """Defines a parameter for a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str  # "string", "integer", "boolean", "array", "object"
    description: str
    required: bool = True
    default: Optional[Any] = None
    enum: Optional[list[str]] = None


class ToolCall(BaseModel):
    """Represents a tool call requested by the model."""

    id: str  # Tool call ID assigned by the provider
    name: str
    input: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name}({', '.join(f'{k}={v!r}' for k, v in self.input.items())})"


class ToolResult(BaseModel):
    """Represents the result of tool execution."""

    tool_call_id: str  # Links to ToolCall.id
    output: str  # Tool output (stdout, file content, confirmation)
    error: Optional[str] = None  # Error message if failed
    exit_code: Optional[int] = None  # For command execution
    is_error: bool = False

    @classmethod
    def failure(cls, tool_call_id: str, message: str, exit_code: Optional[int] = None) -> "ToolResult":
        """Build an error result carrying a display message."""
        return cls(
            tool_call_id=tool_call_id,
            output="",
            error=message,
            exit_code=exit_code,
            is_error=True,
        )

    def to_content(self) -> str:
        """Text handed back to the model for this result."""
        if self.is_error:
            return self.error or "Tool execution failed"
        return self.output

    def __str__(self) -> str:
        """String representation."""
        if self.is_error:
            return f"Error: {self.error}"
        return self.output[:200] + ("..." if len(self.output) > 200 else "")
