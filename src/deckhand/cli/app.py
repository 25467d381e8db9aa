"""
Main Typer application for the deckhand CLI.

Running ``deckhand`` without a subcommand starts the interactive session.
"""

import asyncio
import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from deckhand import __version__
from deckhand.agent.loop import AgentLoop
from deckhand.agent.models import AgentConfig
from deckhand.cli.output import err_console, print_error, print_info, print_json, print_table
from deckhand.config.loader import ConfigurationError, get_config
from deckhand.config.schema import Config
from deckhand.execution.runner import CommandRunner
from deckhand.providers.manager import ProviderManager
from deckhand.tools.builtin import create_builtin_registry
from deckhand.tools.registry import ToolRegistry
from deckhand.ui.turn_loop import TurnLoop

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Create the main Typer app
app = typer.Typer(
    name="deckhand",
    help="Interactive terminal coding assistant with file and shell tools.",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"deckhand version [green]{__version__}[/green]")
        raise typer.Exit()


def configure_logging(config: Config, verbose: bool = False) -> None:
    """Attach handlers to the ``deckhand`` logger.

    Args:
        config: Loaded configuration (logging section)
        verbose: Force DEBUG level
    """
    package_logger = logging.getLogger("deckhand")
    package_logger.setLevel(logging.DEBUG if verbose else config.logging.level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    package_logger.addHandler(
        RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    )

    if config.logging.file:
        log_file = config.logging.file.expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(file_handler)

    package_logger.propagate = False


def build_registry(config: Config) -> ToolRegistry:
    """Create the tool registry with the runner policy from config."""
    runner = CommandRunner(
        shell=config.tools.shell,
        warning_timeout=config.tools.warning_timeout,
        max_output_bytes=config.tools.max_output_bytes,
    )
    return create_builtin_registry(runner)


def _load_config() -> Config:
    try:
        return get_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)


# noinspection PyUnusedLocal
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    model: Annotated[
        str | None,
        typer.Option(
            "--model",
            "-m",
            help="Model to use (name or alias).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]deckhand[/bold blue] - terminal coding assistant

    Run [bold]deckhand[/bold] without arguments to start a session.
    """
    config = _load_config()
    configure_logging(config, verbose)

    if ctx.invoked_subcommand is not None:
        return

    registry = build_registry(config)
    provider_manager = ProviderManager(config.providers)
    if model:
        provider_manager.set_default_model(model)

    agent = AgentLoop(
        provider_manager=provider_manager,
        tool_registry=registry,
        config=AgentConfig(
            max_turns=config.agent.max_turns,
            system_prompt=config.agent.system_prompt,
        ),
    )

    logger.info(f"Starting session with model: {provider_manager.get_current_model()}")

    try:
        asyncio.run(TurnLoop(agent).run())
    except KeyboardInterrupt:
        raise typer.Exit(130)


@app.command("tools")
def list_tools(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the raw tool descriptors as JSON.",
        ),
    ] = False,
) -> None:
    """List the tools offered to the model."""
    registry = build_registry(_load_config())

    if json_output:
        print_json(registry.get_tool_definitions())
        return

    rows = []
    for tool in registry.list_tools():
        params = ", ".join(
            f"{p.name}{'' if p.required else '?'}: {p.type}" for p in tool.parameters
        )
        rows.append([tool.name, params, tool.description.splitlines()[0]])

    print_table(["Name", "Parameters", "Description"], rows, title="Available Tools")


if __name__ == "__main__":
    app()
