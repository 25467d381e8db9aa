"""Tool use system for deckhand.

Tools are the actions the model can request:
- Read a file
- Write a file
- Run a shell command

Each tool publishes a descriptor (name, description, parameter schema)
and an async ``execute`` operation returning a ToolResult.
"""

from deckhand.tools.base import Tool, ToolExecutionError
from deckhand.tools.models import ToolCall, ToolParameter, ToolResult
from deckhand.tools.registry import ToolRegistry

__all__ = [
    "Tool",
    "ToolExecutionError",
    "ToolCall",
    "ToolParameter",
    "ToolResult",
    "ToolRegistry",
]
