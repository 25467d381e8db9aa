"""In-process conversation history."""

from deckhand.memory.history import ConversationTurn, HistoryStore, TurnRole

__all__ = ["ConversationTurn", "HistoryStore", "TurnRole"]
