"""
Conversation history for deckhand.

Holds the user and assistant turns of the current process. History is
not persisted.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TurnRole(str, Enum):
    """Role in a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """A single turn in a conversation."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: TurnRole
    content: str

    def to_message_dict(self) -> dict[str, Any]:
        """Convert to LiteLLM-compatible message dict."""
        return {"role": self.role, "content": self.content}


class HistoryStore:
    """Ordered, append-only list of conversation turns."""

    def __init__(self, turns: list[ConversationTurn] | None = None):
        self._turns: list[ConversationTurn] = list(turns or [])

    def append(self, turn: ConversationTurn) -> None:
        """Append a turn to the end of the history."""
        self._turns.append(turn)

    def add_user(self, content: str) -> ConversationTurn:
        """Record a user turn."""
        turn = ConversationTurn(role=TurnRole.USER, content=content)
        self.append(turn)
        return turn

    def add_assistant(self, content: str) -> ConversationTurn:
        """Record an assistant turn."""
        turn = ConversationTurn(role=TurnRole.ASSISTANT, content=content)
        self.append(turn)
        return turn

    def snapshot(self) -> list[ConversationTurn]:
        """
        Get a copy of the history.

        Returns:
            A new list; changing it does not affect the store.
        """
        return list(self._turns)

    def to_messages(self) -> list[dict[str, Any]]:
        """Convert all turns to LiteLLM-compatible message dicts."""
        return [turn.to_message_dict() for turn in self._turns]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(list(self._turns))

    def __repr__(self) -> str:
        return f"HistoryStore(turns={len(self._turns)})"
