"""Utility functions for tool registry setup."""

import logging

from deckhand.execution.runner import CommandRunner
from deckhand.tools.builtin.bash import BashTool
from deckhand.tools.builtin.file import ReadFileTool, WriteFileTool
from deckhand.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def register_builtin_tools(
    registry: ToolRegistry,
    runner: CommandRunner | None = None,
) -> None:
    """Register the built-in tools: read_file, write_file and bash.

    Args:
        registry: ToolRegistry to register tools in
        runner: Optional CommandRunner for the bash tool
    """
    registry.register(ReadFileTool())
    registry.register(WriteFileTool())
    registry.register(BashTool(runner=runner))

    logger.debug(f"Registered {len(registry)} built-in tools")


def create_builtin_registry(runner: CommandRunner | None = None) -> ToolRegistry:
    """Build a fresh registry holding the built-in tools."""
    registry = ToolRegistry()
    register_builtin_tools(registry, runner)
    return registry
