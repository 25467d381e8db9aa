"""Agent execution loop for iterative tool use."""

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any, Optional

from deckhand.agent.models import AgentConfig, AgentEvent, EventType
from deckhand.agent.parser import ToolCallAccumulator
from deckhand.memory.history import ConversationTurn
from deckhand.providers.exceptions import ProviderError
from deckhand.providers.manager import ProviderManager
from deckhand.providers.models import Message, TokenUsage
from deckhand.tools.models import ToolCall, ToolResult
from deckhand.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class AgentLoop:
    """Agent execution loop with tool use.

    Orchestrates the interaction between the model and tools for one
    user turn:
    1. Stream a completion with the available tools
    2. Forward text deltas as they arrive
    3. Execute requested tools one by one, in order
    4. Feed results back to the model
    5. Repeat until the model responds without tool calls or the turn cap is hit
    """

    def __init__(
        self,
        provider_manager: ProviderManager,
        tool_registry: ToolRegistry,
        config: Optional[AgentConfig] = None,
    ):
        """Initialize agent loop.

        Args:
            provider_manager: ProviderManager for model completions
            tool_registry: ToolRegistry with available tools
            config: AgentConfig for execution settings
        """
        self.provider_manager = provider_manager
        self.tool_registry = tool_registry
        self.config = config or AgentConfig()

    def build_messages(
        self, prompt: str, history: Sequence[ConversationTurn]
    ) -> list[dict[str, Any]]:
        """Build the provider message list for a new user turn.

        Args:
            prompt: The user's input
            history: Prior conversation turns, oldest first

        Returns:
            Messages in LiteLLM format (a fresh list)
        """
        messages: list[dict[str, Any]] = []
        if self.config.system_prompt:
            messages.append(Message.system(self.config.system_prompt).to_dict())
        messages.extend(turn.to_message_dict() for turn in history)
        messages.append(Message.user(prompt).to_dict())
        return messages

    async def stream(
        self, prompt: str, history: Sequence[ConversationTurn]
    ) -> AsyncIterator[AgentEvent]:
        """Run the agent loop for one user turn, streaming events.

        Args:
            prompt: The user's input
            history: Prior conversation turns; never modified

        Yields:
            AgentEvent objects in arrival order. The stream ends after a
            FINAL_RESPONSE or an ERROR event.
        """
        conversation = self.build_messages(prompt, history)
        tool_definitions = self.tool_registry.get_tool_definitions()
        total_usage = TokenUsage()

        logger.info("Starting agent loop")

        for turn in range(1, self.config.max_turns + 1):
            logger.debug(f"Agent turn {turn}/{self.config.max_turns}")

            accumulator = ToolCallAccumulator()
            text_parts: list[str] = []
            turn_usage: Optional[TokenUsage] = None

            try:
                async for chunk in self.provider_manager.stream(
                    conversation,
                    tools=tool_definitions or None,
                    model=self.config.model,
                ):
                    if chunk.content:
                        text_parts.append(chunk.content)
                        yield AgentEvent(event_type=EventType.TEXT, text=chunk.content)
                    if chunk.tool_call_deltas:
                        accumulator.add(chunk.tool_call_deltas)
                    if chunk.usage is not None:
                        # Providers report cumulative usage; keep the latest
                        turn_usage = chunk.usage
            except ProviderError as e:
                logger.error(f"Agent turn {turn} failed: {e}")
                yield AgentEvent.error(str(e))
                return

            if turn_usage is not None:
                total_usage.add(turn_usage)

            text = "".join(text_parts)
            tool_calls = accumulator.finish()

            if not tool_calls:
                logger.info(f"Agent completed after {turn} turns")
                yield AgentEvent(
                    event_type=EventType.FINAL_RESPONSE,
                    text=text,
                    usage=total_usage,
                )
                return

            logger.info(f"Model requested {len(tool_calls)} tool calls")
            conversation.append(
                Message.assistant(text, tool_calls=accumulator.to_message_tool_calls()).to_dict()
            )

            for tool_call in tool_calls:
                yield AgentEvent(
                    event_type=EventType.TOOL_CALL,
                    tool_name=tool_call.name,
                    tool_call_id=tool_call.id,
                )

                result = await self._execute_tool(tool_call)
                conversation.append(
                    Message.tool(tool_call.id, tool_call.name, result.to_content()).to_dict()
                )

                yield AgentEvent(
                    event_type=EventType.TOOL_RESULT,
                    tool_name=tool_call.name,
                    tool_call_id=tool_call.id,
                    message=str(result),
                )

        logger.warning(f"Agent stopped: max turns ({self.config.max_turns}) reached")
        yield AgentEvent.error(
            f"Reached maximum of {self.config.max_turns} turns without a final response"
        )

    async def _execute_tool(self, tool_call: ToolCall) -> ToolResult:
        """Execute a single tool call.

        Args:
            tool_call: Tool call to execute

        Returns:
            Tool result (errors are returned, never raised)
        """
        tool = self.tool_registry.get(tool_call.name)

        if not tool:
            logger.warning(f"Tool not found: {tool_call.name}")
            return ToolResult.failure(tool_call.id, f"Tool '{tool_call.name}' not found")

        logger.info(f"Executing tool: {tool_call}")

        try:
            result = await tool.execute(**{**tool_call.input, "tool_call_id": tool_call.id})
        except Exception as e:
            logger.error(f"Tool execution failed: {tool_call.name}: {e}", exc_info=True)
            return ToolResult.failure(tool_call.id, f"Tool execution failed: {e}")

        if result.is_error:
            logger.info(f"Tool {tool_call.name} returned an error: {result.error}")
        else:
            logger.debug(f"Tool {tool_call.name} returned {len(result.output)} chars")

        return result
