"""Tests for built-in bash tool."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from deckhand.execution.runner import CommandRunner, ExecutionResult
from deckhand.tools.base import ToolExecutionError
from deckhand.tools.builtin.bash import BashTool


def _mock_runner(result=None, error=None, max_output_bytes=51200):
    runner = MagicMock(spec=CommandRunner)
    runner.max_output_bytes = max_output_bytes
    if error is not None:
        runner.execute = AsyncMock(side_effect=error)
    else:
        runner.execute = AsyncMock(return_value=result)
    return runner


class TestBashTool:
    """Tests for BashTool."""

    def test_tool_properties(self):
        """Test tool basic properties."""
        tool = BashTool()

        assert tool.name == "bash"
        assert "bash command" in tool.description
        params = {p.name: p for p in tool.parameters}
        assert list(params) == ["command"]
        assert params["command"].required is True

    @pytest.mark.asyncio
    async def test_execute_success(self):
        """Test successful command execution."""
        runner = _mock_runner(ExecutionResult(stdout="Hello, World!\n", exit_code=0))
        tool = BashTool(runner=runner)

        result = await tool.execute(command="echo 'Hello, World!'", tool_call_id="call_123")

        assert result.tool_call_id == "call_123"
        assert result.is_error is False
        assert result.output == "Hello, World!\n"
        assert result.exit_code == 0
        runner.execute.assert_awaited_once_with("echo 'Hello, World!'")

    @pytest.mark.asyncio
    async def test_execute_nonzero_exit_is_not_an_error(self):
        """Test a failing command still yields its composed output."""
        runner = _mock_runner(
            ExecutionResult(stdout="", stderr="command not found\n", exit_code=127)
        )

        result = await BashTool(runner=runner).execute(command="nope", tool_call_id="c")

        assert result.is_error is False
        assert result.output == "Exit code: 127\nstderr:\ncommand not found\n"
        assert result.exit_code == 127

    @pytest.mark.asyncio
    async def test_output_is_truncated(self):
        """Test the runner's byte cap applies."""
        runner = _mock_runner(
            ExecutionResult(stdout="a" * 50, exit_code=0), max_output_bytes=10
        )

        result = await BashTool(runner=runner).execute(command="x", tool_call_id="c")

        assert result.output == "a" * 10 + "\n... [output truncated, 50 bytes total]"

    @pytest.mark.asyncio
    async def test_spawn_failure(self):
        """Test runner infrastructure errors become error results."""
        runner = _mock_runner(error=ToolExecutionError("Failed to spawn command: no shell"))

        result = await BashTool(runner=runner).execute(command="ls", tool_call_id="c")

        assert result.is_error is True
        assert result.error == "Failed to spawn command: no shell"

    @pytest.mark.asyncio
    async def test_missing_command(self):
        """Test validation errors."""
        runner = _mock_runner(ExecutionResult(exit_code=0))

        result = await BashTool(runner=runner).execute(tool_call_id="c")

        assert result.is_error is True
        assert "Missing required parameters: command" in result.error
        runner.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_real_command(self):
        """Test the scenario from the tool description end to end."""
        result = await BashTool().execute(command="echo hi && echo err 1>&2", tool_call_id="c")

        assert result.output == "hi\nstderr:\nerr\n"
        assert result.exit_code == 0
