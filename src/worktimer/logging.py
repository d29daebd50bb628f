"""Work timer logging configuration."""

import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# stdout carries the stdio transport, so console logging goes to stderr
console = Console(stderr=True)


def get_component_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name

    Returns:
        Logger for the component
    """
    return logging.getLogger(f"worktimer.{name}")


def log_error(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log an error message.

    Args:
        logger: Logger to use
        message: Error message
        error: Optional exception
    """
    if error:
        logger.error(f"{message}: {error!s}")
    else:
        logger.error(message)


def log_tool_call(logger: logging.Logger, tool_name: str, args: dict[str, Any]) -> None:
    """Log a tool call.

    Args:
        logger: Logger to use
        tool_name: Name of the tool
        args: Tool arguments
    """
    logger.info(f"Calling tool {tool_name} with args: {args}")


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Configure logging.

    Sets up rich console output on stderr and, when ``log_file`` is given,
    plain file output.

    Args:
        level: Log level name for the worktimer loggers
        log_file: Optional file to append log records to
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    rich_handler = RichHandler(
        console=console,
        show_path=False,
        omit_repeated_times=False,
        show_time=True,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    worktimer_logger = logging.getLogger("worktimer")
    worktimer_logger.setLevel(level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(level)
        worktimer_logger.addHandler(file_handler)

    # Keep the SDK quiet unless something goes wrong
    logging.getLogger("mcp").setLevel(logging.WARNING)
