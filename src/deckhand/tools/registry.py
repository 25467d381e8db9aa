"""Tool registry for managing available tools."""

import logging
from typing import Optional

from deckhand.tools.base import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry of the tools the model may invoke.

    Tools are looked up by name when the conversation engine dispatches a
    tool call, and their descriptors are sent with every model request.
    """

    def __init__(self):
        """Initialize the tool registry."""
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool.

        Args:
            tool: Tool instance to register

        Raises:
            ValueError: If tool name already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def get(self, name: str) -> Optional[Tool]:
        """Get a tool by name, or None if not registered."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """Get list of all registered tools, in registration order."""
        return list(self._tools.values())

    def list_tool_names(self) -> list[str]:
        """Get list of all registered tool names."""
        return list(self._tools.keys())

    def get_tool_definitions(self) -> list[dict]:
        """Get descriptors for all registered tools.

        Returns:
            List of ``{"name", "description", "parameters"}`` dicts
        """
        return [tool.get_tool_definition() for tool in self._tools.values()]

    def __len__(self) -> int:
        """Get number of registered tools."""
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        """Check if tool is registered."""
        return name in self._tools

    def __repr__(self) -> str:
        """Representation."""
        tools = ", ".join(self._tools.keys())
        return f"<ToolRegistry tools=[{tools}]>"
