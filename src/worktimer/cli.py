"""Work timer CLI.

Runs the MCP server a host process connects to, and lists the tools it
exposes.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from worktimer.config import LOG_LEVELS, load_config
from worktimer.errors import ResourceError
from worktimer.logging import configure_logging, console, get_component_logger, log_error
from worktimer.server.server import WorkTimerServer
from worktimer.server.tools import TOOL_METADATA
from worktimer.server.types import MCPError

logger = get_component_logger("cli")


@click.group()
@click.version_option(package_name="worktimer")
def cli() -> None:
    """Work timer - named stopwatches for MCP hosts."""


@cli.command()
@click.option("--config", "config_path", default=None, help="Path to a YAML config file")
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default=None,
    help="Transport to serve (default from config: stdio)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default from config: WARNING)",
)
def serve(config_path: str | None, transport: str | None, log_level: str | None) -> None:
    """Start the work timer MCP server.

    With the stdio transport the host launches this command and speaks MCP
    over stdin/stdout; logs go to stderr.
    """
    config = load_config(config_path)
    if transport:
        config.server.transport = transport  # type: ignore[assignment]
    if log_level:
        config.logging.level = log_level.upper()

    configure_logging(config.logging.level, config.logging.file)

    server = WorkTimerServer(config)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Shutting down...")


@cli.command()
def tools() -> None:
    """List the tools the server exposes."""
    table = Table(title="Work timer tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")

    for metadata in TOOL_METADATA:
        schema = metadata["parameters"]
        required = set(schema.get("required", []))
        params = [
            name if name in required else f"{name}?"
            for name in schema.get("properties", {})
        ]
        table.add_row(metadata["id"], ", ".join(params) or "-", metadata["description"])

    Console().print(table)


def main() -> None:
    """Main entry point for the worktimer CLI."""
    try:
        cli()
    except (ResourceError, MCPError) as e:
        log_error(logger, "Command failed", e)
        console.print(f"[red]ERROR:[/red] {e!s}")
        sys.exit(1)
