"""Agent execution loop for tool use.

This module provides the conversation engine for one user turn:
- Stream model output with the available tools
- Assemble streamed tool calls
- Execute tools through the registry, one at a time
- Feed results back to the model until it answers
"""

from deckhand.agent.loop import AgentLoop
from deckhand.agent.models import AgentConfig, AgentEvent, EventType
from deckhand.agent.parser import ToolCallAccumulator

__all__ = [
    "AgentLoop",
    "AgentConfig",
    "AgentEvent",
    "EventType",
    "ToolCallAccumulator",
]
