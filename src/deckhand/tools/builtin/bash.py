"""Bash command execution tool."""

import logging
from typing import Optional

from deckhand.execution.runner import CommandRunner, compose_output, truncate_output
from deckhand.tools.base import Tool, ToolExecutionError
from deckhand.tools.models import ToolParameter, ToolResult

logger = logging.getLogger(__name__)


class BashTool(Tool):
    """Execute shell commands in the current working directory.

    Commands run with the host's environment and no isolation. Output and
    exit status come back as the tool result; only failures to spawn or
    wait on the shell are reported as tool errors.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        """Initialize bash tool.

        Args:
            runner: CommandRunner instance. Defaults to one with the
                    standard timeout and output cap.
        """
        self._runner = runner or CommandRunner()
        super().__init__()

    @property
    def runner(self) -> CommandRunner:
        """The runner commands are delegated to."""
        return self._runner

    @property
    def name(self) -> str:
        """Tool name."""
        return "bash"

    @property
    def description(self) -> str:
        """Tool description."""
        return (
            "Execute a bash command and return its output. "
            "Use this for running shell commands, git operations, running tests, "
            "installing packages, etc. "
            "The command runs in the current working directory."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        """Tool parameters."""
        return [
            ToolParameter(
                name="command",
                type="string",
                description="The bash command to execute",
                required=True,
            ),
        ]

    async def execute(self, **kwargs) -> ToolResult:
        """Execute a shell command.

        Args:
            command: Command string passed verbatim to the shell

        Returns:
            ToolResult with the composed command output
        """
        tool_call_id = kwargs.get("tool_call_id", "unknown")

        try:
            self.validate_input(**kwargs)
        except ValueError as e:
            return ToolResult.failure(tool_call_id, str(e))

        command = kwargs["command"]

        try:
            result = await self._runner.execute(command)
        except ToolExecutionError as e:
            logger.warning(f"Bash command could not run: {command[:100]}: {e}")
            return ToolResult.failure(tool_call_id, e.message, exit_code=e.exit_code)

        output = truncate_output(compose_output(result), self._runner.max_output_bytes)
        return ToolResult(
            tool_call_id=tool_call_id,
            output=output,
            exit_code=result.exit_code,
        )
