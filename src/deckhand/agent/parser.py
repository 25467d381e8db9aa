"""Parser for assembling tool calls from streamed model output."""

import json
import logging
from dataclasses import dataclass
from typing import Any

from deckhand.providers.models import ToolCallDelta
from deckhand.tools.models import ToolCall

logger = logging.getLogger(__name__)


@dataclass
class _PendingCall:
    """Tool call fragments collected so far for one stream index."""

    id: str = ""
    name: str = ""
    arguments: str = ""


class ToolCallAccumulator:
    """Accumulates streamed tool-call fragments into complete tool calls.

    Providers stream a tool call as a sequence of deltas sharing an index:
    the first carries the id and function name, later ones append pieces
    of the JSON argument string.
    """

    def __init__(self):
        self._pending: dict[int, _PendingCall] = {}

    def add(self, deltas: list[ToolCallDelta]) -> None:
        """Merge a chunk's tool-call deltas.

        Args:
            deltas: Deltas from one StreamChunk
        """
        for delta in deltas:
            pending = self._pending.setdefault(delta.index, _PendingCall())
            if delta.id:
                pending.id = delta.id
            if delta.name:
                pending.name += delta.name
            if delta.arguments:
                pending.arguments += delta.arguments

    def has_calls(self) -> bool:
        """Check whether any tool call fragments were received."""
        return any(pending.name for pending in self._pending.values())

    def finish(self) -> list[ToolCall]:
        """Build the completed tool calls in stream index order.

        Returns:
            List of ToolCall objects. Arguments that are not a JSON object
            are passed through as ``{"raw_input": <text>}`` so the tool
            rejects them with a validation error.
        """
        tool_calls = []

        for index in sorted(self._pending):
            pending = self._pending[index]
            if not pending.name:
                logger.warning(f"Dropping tool call without a name at index {index}")
                continue

            tool_calls.append(
                ToolCall(
                    id=pending.id or f"call_{index}",
                    name=pending.name,
                    input=self._parse_arguments(pending.arguments),
                )
            )

        return tool_calls

    def to_message_tool_calls(self) -> list[dict[str, Any]]:
        """Build the assistant message ``tool_calls`` list (OpenAI format).

        Returns:
            One function entry per completed tool call, ids matching finish()
        """
        entries = []

        for index in sorted(self._pending):
            pending = self._pending[index]
            if not pending.name:
                continue

            entries.append(
                {
                    "id": pending.id or f"call_{index}",
                    "type": "function",
                    "function": {
                        "name": pending.name,
                        "arguments": pending.arguments or "{}",
                    },
                }
            )

        return entries

    @staticmethod
    def _parse_arguments(arguments: str) -> dict[str, Any]:
        if not arguments.strip():
            return {}

        try:
            parsed = json.loads(arguments)
        except json.JSONDecodeError:
            logger.warning(f"Failed to parse tool input as JSON: {arguments[:200]}")
            return {"raw_input": arguments}

        if not isinstance(parsed, dict):
            logger.warning(f"Tool input is not a JSON object: {arguments[:200]}")
            return {"raw_input": arguments}

        return parsed
