"""Work timer MCP server package."""

from worktimer.server.dispatcher import Dispatcher
from worktimer.server.mcp import create_app
from worktimer.server.server import WorkTimerServer

__all__ = ["Dispatcher", "WorkTimerServer", "create_app"]
