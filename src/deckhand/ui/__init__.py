"""Terminal interaction for deckhand."""

from deckhand.ui.turn_loop import TurnLoop, format_usage

__all__ = ["TurnLoop", "format_usage"]
