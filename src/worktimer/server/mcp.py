"""MCP application exposing the timer tools."""

import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server

from worktimer.server.dispatcher import Dispatcher
from worktimer.server.tools import TOOL_METADATA

logger = logging.getLogger(__name__)

SERVER_NAME = "work-timer"
SERVER_VERSION = "1.0.0"


def create_app(
    dispatcher: Dispatcher,
    name: str = SERVER_NAME,
    version: str = SERVER_VERSION,
) -> Server:
    """Create the MCP server for a dispatcher.

    Args:
        dispatcher: Dispatcher that handles every tool call
        name: Server name reported to clients
        version: Server version reported to clients

    Returns:
        Low-level MCP server with the timer tools registered
    """
    app: Server = Server(name, version=version)
    tools = [
        types.Tool(
            name=metadata["id"],
            description=metadata["description"],
            inputSchema=metadata["parameters"],
        )
        for metadata in TOOL_METADATA
    ]

    @app.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tools

    @app.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        text = dispatcher.dispatch(name, arguments)
        return [types.TextContent(type="text", text=text)]

    logger.debug("Registered %d tools on %s", len(tools), name)
    return app
