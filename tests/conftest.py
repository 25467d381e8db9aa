"""
Pytest configuration and fixtures for deckhand tests.
"""

import tempfile
from collections.abc import AsyncIterator, Generator
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from deckhand.config.loader import clear_config_cache
from deckhand.providers.models import StreamChunk, TokenUsage, ToolCallDelta


class FakeProvider:
    """Scripted stand-in for ProviderManager.

    Each call to ``stream`` replays the next script: a list of StreamChunk
    objects, or an exception instance raised after the chunks before it.
    """

    def __init__(self, *scripts: list[Any]):
        self.scripts = list(scripts)
        self.calls: list[dict[str, Any]] = []

    async def stream(
        self,
        messages: list[dict[str, Any]],
        *,
        tools: list[dict[str, Any]] | None = None,
        model: str | None = None,
    ) -> AsyncIterator[StreamChunk]:
        self.calls.append(
            {"messages": [dict(m) for m in messages], "tools": tools, "model": model}
        )
        script = self.scripts.pop(0)
        for item in script:
            if isinstance(item, Exception):
                raise item
            yield item


def text_chunk(text: str) -> StreamChunk:
    """A chunk carrying a text delta."""
    return StreamChunk(content=text)


def usage_chunk(input_tokens: int, output_tokens: int) -> StreamChunk:
    """A chunk reporting token usage."""
    return StreamChunk(usage=TokenUsage(input_tokens=input_tokens, output_tokens=output_tokens))


def tool_chunk(
    index: int, call_id: str | None = None, name: str | None = None, arguments: str = ""
) -> StreamChunk:
    """A chunk carrying one tool-call fragment."""
    return StreamChunk(
        tool_call_deltas=[
            ToolCallDelta(index=index, id=call_id, name=name, arguments=arguments)
        ]
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_deckhand_home(
    temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point DECKHAND_HOME at a temporary directory with a clean environment."""
    import os

    for key in list(os.environ):
        if key.startswith("DECKHAND_"):
            monkeypatch.delenv(key)

    deckhand_home = temp_dir / ".deckhand"
    deckhand_home.mkdir()
    monkeypatch.setenv("DECKHAND_HOME", str(deckhand_home))
    clear_config_cache()

    yield deckhand_home

    clear_config_cache()


@pytest.fixture
def mock_project_dir(temp_dir: Path) -> Generator[Path, None, None]:
    """Provide a project directory with a .deckhand/ folder."""
    project_dir = temp_dir / "test-project"
    project_dir.mkdir()
    (project_dir / ".deckhand").mkdir()

    yield project_dir


@pytest.fixture
def sample_config() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "providers": {
            "default": "openai/gpt-4o",
            "aliases": {
                "fast": "openai/gpt-4o-mini",
                "smart": "anthropic/claude-opus-4-20250514",
            },
        },
        "tools": {
            "shell": "sh",
            "warning_timeout": 5,
        },
    }
