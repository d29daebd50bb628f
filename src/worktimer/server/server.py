"""Work timer MCP server implementation."""

import logging
from threading import Lock

import anyio
import uvicorn
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route

from worktimer.config import WorkTimerConfig
from worktimer.logging import log_error
from worktimer.registry import TimerRegistry
from worktimer.server.dispatcher import Dispatcher
from worktimer.server.mcp import create_app
from worktimer.server.types import MCPError, ProtocolError, ServerState

logger = logging.getLogger(__name__)


class WorkTimerServer:
    """Work timer MCP server implementation.

    Owns the single timer registry for the lifetime of the process and hands
    it to the dispatcher behind the MCP tools.
    """

    def __init__(self, config: WorkTimerConfig) -> None:
        """Initialize server.

        Args:
            config: Server configuration

        Raises:
            ProtocolError: If configuration is invalid
        """
        if not config.server.name:
            raise ProtocolError("Server name not configured")
        if config.server.transport == "sse" and not config.server.host:
            raise ProtocolError("Server host not configured")

        self._config = config
        self._state = ServerState.INITIALIZING
        self._lock = Lock()

        self.registry = TimerRegistry(warning_threshold=config.timers.warning_threshold)
        self.dispatcher = Dispatcher(self.registry)
        self.app: Server = create_app(
            self.dispatcher, name=config.server.name, version=config.server.version
        )

    @property
    def state(self) -> ServerState:
        """Get server state."""
        return self._state

    def start(self) -> None:
        """Mark the server ready to accept calls.

        Raises:
            MCPError: If server is in an invalid state
        """
        if self._state in (ServerState.ERROR, ServerState.SHUTDOWN):
            raise MCPError(f"Cannot start server in {self._state.name} state")

        with self._lock:
            self._state = ServerState.READY
            logger.info(
                "Server %s ready with %d tools",
                self._config.server.name,
                len(self.dispatcher.operations),
            )

    def run(self) -> None:
        """Start the server and block serving the configured transport.

        Raises:
            MCPError: If the transport fails
        """
        self.start()
        transport = self._config.server.transport
        logger.info("Serving over %s", transport)
        try:
            if transport == "sse":
                self._run_sse()
            else:
                anyio.run(self._run_stdio)
        except Exception as e:
            self._state = ServerState.ERROR
            log_error(logger, "Server failed", e)
            raise MCPError(f"Server failed: {str(e)}") from e
        finally:
            if self._state == ServerState.READY:
                self.stop()

    async def _run_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            await self.app.run(
                read_stream, write_stream, self.app.create_initialization_options()
            )

    def create_sse_app(self) -> Starlette:
        """Build the Starlette application serving the SSE transport."""
        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as (read_stream, write_stream):
                await self.app.run(
                    read_stream, write_stream, self.app.create_initialization_options()
                )
            return Response()

        return Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse, methods=["GET"]),
                Mount("/messages/", app=sse.handle_post_message),
            ]
        )

    def _run_sse(self) -> None:
        uvicorn.run(
            self.create_sse_app(),
            host=self._config.server.host,
            port=self._config.server.port,
            log_level="warning",
        )

    def stop(self) -> None:
        """Stop the server and drop any timers still running.

        Raises:
            MCPError: If server is in an invalid state
        """
        if self._state == ServerState.ERROR:
            raise MCPError("Cannot stop server in ERROR state")

        with self._lock:
            discarded = self.registry.clear()
            if discarded:
                logger.warning("Discarding %d running timer(s) on shutdown", discarded)
            self._state = ServerState.SHUTDOWN
            logger.info("Server stopped")
