"""Work timer configuration management."""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from worktimer.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class WorkTimerConfig(BaseModel):
    """Work timer configuration model with validation."""

    class Server(BaseModel):
        """MCP server configuration."""

        name: str = Field(default="work-timer", description="Name reported to clients")
        version: str = Field(default="1.0.0", description="Version reported to clients")
        transport: Literal["stdio", "sse"] = Field(
            default="stdio", description="Transport the host speaks"
        )
        host: str = Field(default="127.0.0.1", description="Bind address for sse")
        port: int = Field(default=8765, gt=0, description="Bind port for sse")

    class Timers(BaseModel):
        """Timer registry configuration."""

        warning_threshold: int = Field(
            default=3,
            ge=1,
            description="Running timer count that triggers a reminder on start",
        )

    class Logging(BaseModel):
        """Logging configuration."""

        level: str = Field(default="WARNING", description="Console and file log level")
        file: Path | None = Field(default=None, description="Optional log file")

        @field_validator("level")
        @classmethod
        def check_level(cls, v: str) -> str:
            """Normalize and check the log level name."""
            level = v.upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
            return level

        @field_validator("file")
        @classmethod
        def expand_path(cls, v: Path | None) -> Path | None:
            """Expand user in the log file path."""
            return v.expanduser() if v is not None else None

    server: Server = Field(default_factory=Server)
    timers: Timers = Field(default_factory=Timers)
    logging: Logging = Field(default_factory=Logging)


def load_config(config_path: str | None = None) -> WorkTimerConfig:
    """Load configuration from file and environment variables.

    Args:
        config_path: Path to config file. If None, uses default locations.

    Returns:
        Validated configuration object

    Raises:
        ConfigurationError: If the file cannot be parsed or a value is invalid
    """
    load_dotenv()

    # Default config locations
    config_locations = [
        os.environ.get("WORKTIMER_CONFIG", ""),
        "config/worktimer.yaml",
        "~/.config/worktimer/config.yaml",
    ]

    # Add specified config path
    if config_path:
        if not Path(config_path).expanduser().exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        config_locations.insert(0, config_path)

    # Load first existing config file
    config_data: dict[str, Any] = {}
    for loc in config_locations:
        if not loc:
            continue
        path = Path(loc).expanduser()
        if path.exists():
            try:
                with open(path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {path}: {e}") from e
            if not isinstance(config_data, dict):
                raise ConfigurationError(f"Config file {path} must contain a mapping")
            break

    # Override with environment variables
    if "WORKTIMER_TRANSPORT" in os.environ:
        config_data.setdefault("server", {})["transport"] = os.environ[
            "WORKTIMER_TRANSPORT"
        ]

    if "WORKTIMER_LOG_LEVEL" in os.environ:
        config_data.setdefault("logging", {})["level"] = os.environ[
            "WORKTIMER_LOG_LEVEL"
        ]

    try:
        return WorkTimerConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
