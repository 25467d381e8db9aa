"""Tests for agent models."""

import pytest
from pydantic import ValidationError

from deckhand.agent.models import AgentConfig, AgentEvent, EventType
from deckhand.config.schema import DEFAULT_SYSTEM_PROMPT
from deckhand.providers.models import TokenUsage


class TestAgentConfig:
    """Tests for AgentConfig."""

    def test_default_config(self):
        """Test default configuration."""
        config = AgentConfig()

        assert config.max_turns == 100
        assert config.system_prompt == DEFAULT_SYSTEM_PROMPT
        assert config.model is None

    def test_max_turns_validation(self):
        """Test the turn cap must be positive."""
        with pytest.raises(ValidationError):
            AgentConfig(max_turns=0)


class TestAgentEvent:
    """Tests for AgentEvent."""

    def test_event_types(self):
        assert EventType.TEXT == "text"
        assert EventType.FINAL_RESPONSE == "final_response"

    def test_text_event(self):
        event = AgentEvent(event_type=EventType.TEXT, text="Hello")

        assert event.text == "Hello"
        assert event.usage is None

    def test_final_event_carries_usage(self):
        usage = TokenUsage(input_tokens=10, output_tokens=5)
        event = AgentEvent(event_type=EventType.FINAL_RESPONSE, usage=usage)

        assert event.usage.input_tokens == 10
        assert event.usage.output_tokens == 5

    def test_error_event(self):
        event = AgentEvent.error("boom")

        assert event.event_type == EventType.ERROR
        assert event.message == "boom"
