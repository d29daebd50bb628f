"""Test fixtures for the work timer."""

from datetime import datetime, timedelta

import pytest

from worktimer.registry import TimerRegistry
from worktimer.server.dispatcher import Dispatcher


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at 9:00:00 AM."""
    return FakeClock(datetime(2024, 3, 1, 9, 0, 0))


@pytest.fixture
def registry(clock: FakeClock) -> TimerRegistry:
    """Empty registry driven by the fake clock."""
    return TimerRegistry(clock=clock)


@pytest.fixture
def dispatcher(registry: TimerRegistry) -> Dispatcher:
    """Dispatcher bound to the test registry."""
    return Dispatcher(registry)
