"""File operation tools."""

import logging
import os

from deckhand.tools.base import Tool
from deckhand.tools.models import ToolParameter, ToolResult

logger = logging.getLogger(__name__)


class ReadFileTool(Tool):
    """Read file contents.

    Read-only operation that returns the whole file as text. The file must
    be valid UTF-8; content is returned unmodified, including line endings.
    """

    @property
    def name(self) -> str:
        """Tool name."""
        return "read_file"

    @property
    def description(self) -> str:
        """Tool description."""
        return (
            "Read the contents of a file at the specified path. "
            "Returns the file contents as a string."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        """Tool parameters."""
        return [
            ToolParameter(
                name="path",
                type="string",
                description="The path to the file to read",
                required=True,
            ),
        ]

    async def execute(self, **kwargs) -> ToolResult:
        """Read file contents.

        Args:
            path: Path to file

        Returns:
            ToolResult with the file contents, or an error naming the path
        """
        tool_call_id = kwargs.get("tool_call_id", "unknown")

        try:
            self.validate_input(**kwargs)
        except ValueError as e:
            return ToolResult.failure(tool_call_id, str(e))

        path = kwargs["path"]
        logger.info(f"Reading file: {path}")

        try:
            with open(path, encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"File read error: {path}: {e}")
            return ToolResult.failure(tool_call_id, f"Failed to read file '{path}': {e}")

        return ToolResult(tool_call_id=tool_call_id, output=content)


class WriteFileTool(Tool):
    """Write content to a file.

    Creates missing parent directories, then replaces the file contents.
    Not transactional: directories created before a failed write are kept.
    """

    @property
    def name(self) -> str:
        """Tool name."""
        return "write_file"

    @property
    def description(self) -> str:
        """Tool description."""
        return (
            "Write content to a file at the specified path. "
            "Creates parent directories if they don't exist. "
            "Overwrites the file if it already exists."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        """Tool parameters."""
        return [
            ToolParameter(
                name="path",
                type="string",
                description="The path to the file to write",
                required=True,
            ),
            ToolParameter(
                name="content",
                type="string",
                description="The content to write to the file",
                required=True,
            ),
        ]

    async def execute(self, **kwargs) -> ToolResult:
        """Write file contents.

        Args:
            path: Path to file
            content: Text to write

        Returns:
            ToolResult with a confirmation naming the byte count and path
        """
        tool_call_id = kwargs.get("tool_call_id", "unknown")

        try:
            self.validate_input(**kwargs)
        except ValueError as e:
            return ToolResult.failure(tool_call_id, str(e))

        path = kwargs["path"]
        content = kwargs["content"]

        parent = os.path.dirname(path)
        if parent:
            try:
                os.makedirs(parent, exist_ok=True)
            except OSError as e:
                logger.warning(f"Directory creation failed: {parent}: {e}")
                return ToolResult.failure(tool_call_id, f"Failed to create directories: {e}")

        try:
            data = content.encode("utf-8")
            with open(path, "wb") as f:
                f.write(data)
        except (OSError, UnicodeError) as e:
            logger.warning(f"File write error: {path}: {e}")
            return ToolResult.failure(tool_call_id, f"Failed to write file '{path}': {e}")

        logger.info(f"Wrote {len(data)} bytes to {path}")
        return ToolResult(
            tool_call_id=tool_call_id,
            output=f"Successfully wrote {len(data)} bytes to '{path}'",
        )
