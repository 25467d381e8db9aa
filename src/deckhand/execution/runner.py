"""
Command runner for shell execution.

Spawns ``<shell> -c <command>``, captures stdout and stderr, warns the
operator when a command runs past the advisory timeout, and bounds the
size of the output handed back to the model.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console

from deckhand.tools.base import ToolExecutionError

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "bash"
DEFAULT_WARNING_TIMEOUT = 60.0
DEFAULT_MAX_OUTPUT_BYTES = 50 * 1024

TRUNCATION_MARKER = "\n... [output truncated, {total} bytes total]"

_err_console = Console(stderr=True, highlight=False)


@dataclass
class ExecutionResult:
    """Captured outcome of one command execution."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = -1  # -1 when the status is unknown (e.g. killed by a signal)
    warned: bool = False  # advisory timeout elapsed before exit

    @property
    def success(self) -> bool:
        """Whether the command exited with status zero."""
        return self.exit_code == 0


def compose_output(result: ExecutionResult) -> str:
    """
    Build the text reported to the model for a finished command.

    Zero exit status: stdout, then a ``stderr:`` block if stderr is
    non-empty. Any other status: an ``Exit code: <n>`` line followed by
    ``stdout:`` and ``stderr:`` blocks for the streams that produced output.

    Args:
        result: Captured execution result.

    Returns:
        Composed output string (not yet size-bounded).
    """
    stdout = result.stdout
    stderr = result.stderr

    if result.success:
        output = stdout
        if stderr:
            if output and not output.endswith("\n"):
                output += "\n"
            output += f"stderr:\n{stderr}"
        return output

    parts = [f"Exit code: {result.exit_code}\n"]
    if stdout:
        parts.append(f"stdout:\n{stdout}")
        if not stdout.endswith("\n"):
            parts.append("\n")
    if stderr:
        parts.append(f"stderr:\n{stderr}")
    return "".join(parts)


def truncate_output(output: str, max_bytes: int) -> str:
    """
    Bound output to ``max_bytes`` of UTF-8.

    The cut never splits a multi-byte character. A marker reporting the
    original byte length is appended when anything was dropped.

    Args:
        output: Text to bound.
        max_bytes: Maximum number of UTF-8 bytes kept.

    Returns:
        The original text, or its truncated prefix plus the marker.
    """
    encoded = output.encode("utf-8")
    total = len(encoded)
    if total <= max_bytes:
        return output

    # The input is valid UTF-8, so the only undecodable bytes are a
    # character cut in half at the end.
    head = encoded[:max_bytes].decode("utf-8", errors="ignore")
    return head + TRUNCATION_MARKER.format(total=total)


class CommandRunner:
    """
    Runs shell commands for the bash tool.

    The timeout is advisory: once it elapses a single warning is shown and
    the runner keeps waiting for the command to finish. The child process
    is always reaped before a call returns.
    """

    def __init__(
        self,
        shell: str = DEFAULT_SHELL,
        warning_timeout: float = DEFAULT_WARNING_TIMEOUT,
        max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES,
        on_long_running: Callable[[str], None] | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            shell: Shell interpreter invoked as ``<shell> -c <command>``.
            warning_timeout: Seconds before the long-running warning.
            max_output_bytes: Byte cap on the composed output.
            on_long_running: Callback receiving the warning text. Defaults
                to printing on stderr.
        """
        if warning_timeout <= 0:
            raise ValueError("warning_timeout must be positive")
        if max_output_bytes <= 0:
            raise ValueError("max_output_bytes must be positive")

        self.shell = shell
        self.warning_timeout = warning_timeout
        self.max_output_bytes = max_output_bytes
        self._on_long_running = on_long_running or _print_warning

    def warning_message(self) -> str:
        """Text shown once a command passes the advisory timeout."""
        return (
            f"\n[Command running for >{self.warning_timeout:g}s. "
            "Press Ctrl+C to interrupt]"
        )

    async def execute(self, command: str) -> ExecutionResult:
        """
        Spawn the shell and wait for the command to finish.

        Both pipes are drained while waiting so a chatty command can not
        block on a full pipe.

        Args:
            command: Command string passed verbatim to the shell.

        Returns:
            ExecutionResult with decoded output and exit status.

        Raises:
            ToolExecutionError: If the shell can not be spawned or waited on.
        """
        logger.info(f"Running command: {command[:100]}")

        try:
            process = await asyncio.create_subprocess_exec(
                self.shell,
                "-c",
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to spawn {self.shell}: {e}")
            raise ToolExecutionError(f"Failed to spawn command: {e}") from e

        communicate = asyncio.ensure_future(process.communicate())
        warned = False

        try:
            done, _ = await asyncio.wait({communicate}, timeout=self.warning_timeout)
            if not done:
                warned = True
                logger.warning(
                    f"Command still running after {self.warning_timeout:g}s: {command[:100]}"
                )
                self._on_long_running(self.warning_message())
            stdout_bytes, stderr_bytes = await communicate
        except asyncio.CancelledError:
            # The interrupt reaches the child through its process group. Keep
            # draining so it can exit, then reap it before giving up the task.
            await asyncio.wait({communicate})
            raise
        except Exception as e:
            logger.error(f"Waiting on command failed: {e}", exc_info=True)
            raise ToolExecutionError(f"Command failed: {e}") from e

        returncode = process.returncode
        exit_code = returncode if returncode is not None and returncode >= 0 else -1
        logger.debug(f"Command exited with status {returncode}")

        return ExecutionResult(
            stdout=(stdout_bytes or b"").decode("utf-8", errors="replace"),
            stderr=(stderr_bytes or b"").decode("utf-8", errors="replace"),
            exit_code=exit_code,
            warned=warned,
        )

    async def run(self, command: str) -> str:
        """
        Execute a command and return its composed, size-bounded output.

        A non-zero exit status is reported in the returned text, not raised.

        Raises:
            ToolExecutionError: If the shell can not be spawned or waited on.
        """
        result = await self.execute(command)
        return truncate_output(compose_output(result), self.max_output_bytes)


def _print_warning(message: str) -> None:
    _err_console.print(message, markup=False)
