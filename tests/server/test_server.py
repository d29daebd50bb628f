"""Tests for the server lifecycle."""

import pytest

from worktimer.config import WorkTimerConfig
from worktimer.server.server import WorkTimerServer
from worktimer.server.types import MCPError, ProtocolError, ServerState


def test_initialization() -> None:
    """Test server wiring from configuration."""
    config = WorkTimerConfig(timers={"warning_threshold": 2})
    server = WorkTimerServer(config)

    assert server.state == ServerState.INITIALIZING
    assert server.app.name == "work-timer"
    assert server.dispatcher.registry is server.registry
    assert server.registry.warning_threshold == 2


def test_invalid_config() -> None:
    """Test a server without a name is rejected."""
    with pytest.raises(ProtocolError):
        WorkTimerServer(WorkTimerConfig(server={"name": ""}))


def test_start_stop() -> None:
    """Test the lifecycle drops running timers on stop."""
    server = WorkTimerServer(WorkTimerConfig())
    server.start()
    assert server.state == ServerState.READY

    server.dispatcher.dispatch("start_timer", {"label": "a"})
    server.stop()
    assert server.state == ServerState.SHUTDOWN
    assert len(server.registry) == 0

    with pytest.raises(MCPError):
        server.start()


def test_sse_app_routes() -> None:
    """Test the SSE application exposes its endpoints."""
    server = WorkTimerServer(WorkTimerConfig(server={"transport": "sse"}))
    app = server.create_sse_app()
    paths = {route.path for route in app.routes}
    assert "/sse" in paths
    assert "/messages" in paths
