"""
Unit tests for CLI commands.
"""

import json
from importlib.metadata import entry_points

import pytest
from typer.testing import CliRunner

from deckhand import __version__
from deckhand.cli.app import app


@pytest.fixture
def isolated(mock_deckhand_home, temp_dir, monkeypatch):
    """Run CLI commands from an empty directory with a fresh home."""
    monkeypatch.chdir(temp_dir)
    return mock_deckhand_home


def test_version(cli_runner: CliRunner) -> None:
    """Test --version flag."""
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_console_script_entry_point() -> None:
    """Test the installed deckhand script runs the typer app."""
    (entry_point,) = entry_points(group="console_scripts", name="deckhand")
    assert entry_point.value == "deckhand.cli.app:app"
    assert entry_point.load() is app


def test_help(cli_runner: CliRunner) -> None:
    """Test --help flag."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "deckhand" in result.stdout
    assert "tools" in result.stdout
    assert "--model" in result.stdout


def test_tools_table(cli_runner: CliRunner, isolated) -> None:
    """Test tools command lists the built-in tools."""
    result = cli_runner.invoke(app, ["tools"])
    assert result.exit_code == 0
    for name in ("read_file", "write_file", "bash"):
        assert name in result.stdout


def test_tools_json(cli_runner: CliRunner, isolated) -> None:
    """Test tools command prints descriptors as JSON."""
    result = cli_runner.invoke(app, ["tools", "--json"])
    assert result.exit_code == 0

    descriptors = json.loads(result.stdout)
    assert [d["name"] for d in descriptors] == ["read_file", "write_file", "bash"]
    assert descriptors[2]["parameters"]["required"] == ["command"]


def test_invalid_config_exits(cli_runner: CliRunner, isolated) -> None:
    """Test a configuration error exits with status 1."""
    (isolated / "config.yaml").write_text("tools:\n  max_output_bytes: 0\n")

    result = cli_runner.invoke(app, ["tools"])
    assert result.exit_code == 1


def test_session_quit(cli_runner: CliRunner, isolated) -> None:
    """Test the interactive session starts and exits on quit."""
    result = cli_runner.invoke(app, [], input="quit\n")
    assert result.exit_code == 0
    assert f"deckhand v{__version__}" in result.stdout
    assert "Type 'exit' or 'quit' to exit." in result.stdout
    assert "Goodbye!" in result.stdout


def test_session_end_of_input(cli_runner: CliRunner, isolated) -> None:
    """Test end of input ends the session cleanly."""
    result = cli_runner.invoke(app, ["--model", "openai/gpt-4o"], input="")
    assert result.exit_code == 0
    assert "Goodbye!" in result.stdout
