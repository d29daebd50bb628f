"""Type definitions for the work timer MCP server module."""

from enum import Enum, auto
from typing import Any, TypedDict


class ServerState(Enum):
    """Server state enumeration."""

    INITIALIZING = auto()
    READY = auto()
    ERROR = auto()
    SHUTDOWN = auto()


class ToolType(Enum):
    """Tool type enumeration."""

    START = auto()
    CURRENT = auto()
    STOP = auto()
    LIST = auto()
    STOP_ALL = auto()
    RENAME = auto()
    SWITCH = auto()


class MCPError(Exception):
    """Base exception for MCP-related errors."""

    pass


class ProtocolError(MCPError):
    """Raised for protocol-level errors."""

    pass


class ToolMetadata(TypedDict):
    """Tool metadata type."""

    id: str
    type: ToolType
    name: str
    description: str
    parameters: dict[str, Any]
