"""Shell command execution for the bash tool."""

from deckhand.execution.runner import (
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_SHELL,
    DEFAULT_WARNING_TIMEOUT,
    CommandRunner,
    ExecutionResult,
    compose_output,
    truncate_output,
)

__all__ = [
    "CommandRunner",
    "ExecutionResult",
    "compose_output",
    "truncate_output",
    "DEFAULT_SHELL",
    "DEFAULT_WARNING_TIMEOUT",
    "DEFAULT_MAX_OUTPUT_BYTES",
]
