"""
Interactive turn loop for deckhand.

Reads one line at a time from the operator, streams the agent's response
to the terminal and records completed turns in the history.
"""

import logging
from collections.abc import Callable
from typing import Optional

from rich.console import Console

from deckhand import __version__
from deckhand.agent.loop import AgentLoop
from deckhand.agent.models import EventType
from deckhand.memory.history import HistoryStore
from deckhand.providers.models import TokenUsage

logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_COMMANDS = {"exit", "quit"}


def format_usage(usage: TokenUsage) -> str:
    """Format the token usage line shown after each response."""
    return f"[Tokens: {usage.input_tokens:,} in / {usage.output_tokens:,} out]"


class TurnLoop:
    """Runs the read / stream / render cycle until the operator leaves."""

    def __init__(
        self,
        agent: AgentLoop,
        history: Optional[HistoryStore] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        read_input: Optional[Callable[[str], str]] = None,
    ):
        """Initialize the turn loop.

        Args:
            agent: Conversation engine used for every turn
            history: History store (a new empty one if omitted)
            console: Console for the response stream
            err_console: Console for errors
            read_input: Line reader taking the prompt; raises EOFError at
                end of input. Defaults to ``console.input``.
        """
        self.agent = agent
        self.history = history if history is not None else HistoryStore()
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self._read_input = read_input or self.console.input

    def print_banner(self) -> None:
        """Print the startup banner."""
        self._out(f"deckhand v{__version__}")
        self._out("Type 'exit' or 'quit' to exit.")
        self._out("")

    async def run(self) -> None:
        """Run turns until exit, end of input or interrupt."""
        self.print_banner()

        while True:
            try:
                line = self._read_input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._out("\nGoodbye!")
                return
            except OSError as e:
                logger.error(f"Failed to read input: {e}")
                self._err(f"Error reading input: {e}")
                continue

            text = line.strip()
            if not text:
                continue

            if text.lower() in EXIT_COMMANDS:
                self._out("Goodbye!")
                return

            await self.run_turn(text)

    async def run_turn(self, text: str) -> None:
        """Stream one response and record the turn.

        Args:
            text: The operator's input (already trimmed, non-empty)
        """
        self._out("")

        response_parts: list[str] = []
        usage = TokenUsage()
        failed = False

        events = self.agent.stream(text, self.history.snapshot())
        try:
            async for event in events:
                if event.event_type == EventType.TEXT:
                    response_parts.append(event.text)
                    self._write(event.text)
                elif event.event_type == EventType.TOOL_CALL:
                    self._out(f"\n[Calling tool: {event.tool_name}]")
                elif event.event_type == EventType.TOOL_RESULT:
                    self._out(f"[Tool result received for: {event.tool_call_id}]")
                elif event.event_type == EventType.FINAL_RESPONSE:
                    if event.usage is not None:
                        usage = event.usage
                elif event.event_type == EventType.ERROR:
                    self._err(f"\nError: {event.message}")
                    failed = True
                    break
        finally:
            await events.aclose()
        self._out("\n")
        self._out(format_usage(usage))
        self._out("")

        self.history.add_user(text)
        response = "".join(response_parts)
        if failed:
            if response:
                logger.debug(f"Discarding {len(response)} chars of partial response")
        elif response:
            self.history.add_assistant(response)

    def _write(self, text: str) -> None:
        """Echo model text exactly as received."""
        self.console.file.write(text)
        self.console.file.flush()

    def _out(self, message: str) -> None:
        self.console.print(
            message, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def _err(self, message: str) -> None:
        self.err_console.print(
            message, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
