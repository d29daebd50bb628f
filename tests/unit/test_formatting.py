"""Tests for outcome rendering."""

from datetime import datetime, timezone

import pytest

from worktimer.formatting import format_clock, format_elapsed, render
from worktimer.registry import (
    AlreadyRunning,
    NoTimers,
    NotRunning,
    Renamed,
    RenameRejected,
    Running,
    Started,
    Stopped,
    StoppedAll,
    Switched,
    TimerEntry,
    TimerList,
)

NINE = datetime(2024, 3, 1, 9, 0, 0)
NINE_OH_FIVE = datetime(2024, 3, 1, 9, 5, 0)


@pytest.mark.parametrize(
    ("ms", "expected"),
    [
        (0, "0s"),
        (999, "0s"),
        (59_000, "59s"),
        (60_000, "1m 0s"),
        (65_000, "1m 5s"),
        (3_600_000, "1h 0m 0s"),
        (3_661_000, "1h 1m 1s"),
        (3_725_000, "1h 2m 5s"),
        (90_000_000, "25h 0m 0s"),
    ],
)
def test_format_elapsed(ms: int, expected: str) -> None:
    """Test elapsed durations."""
    assert format_elapsed(ms) == expected


def test_format_clock() -> None:
    """Test time of day formatting."""
    assert format_clock(NINE) == "9:00:00 AM"
    assert format_clock(datetime(2024, 3, 1, 15, 4, 5)) == "3:04:05 PM"
    assert format_clock(datetime(2024, 3, 1, 0, 30, 0)) == "12:30:00 AM"


def test_render_started() -> None:
    """Test the start message and the running-timers reminder."""
    assert render(Started("a", NINE)) == 'Timer "a" started at 9:00:00 AM.'

    text = render(Started("c", NINE, ("a", "b", "c")))
    assert text == (
        'Timer "c" started at 9:00:00 AM.\n\n'
        'Heads up: you now have 3 timers running ("a", "b", "c"). '
        "Did you forget to stop one?"
    )


def test_render_single_timer_outcomes() -> None:
    """Test messages about one timer."""
    assert render(AlreadyRunning("a", NINE)) == (
        'Timer "a" is already running (started at 9:00:00 AM).'
    )
    assert render(NotRunning("a")) == 'No timer named "a" is running.'
    assert render(Running("a", NINE, 300_000)) == (
        'Timer "a" is running.\nStarted:  9:00:00 AM\nElapsed:  5m 0s'
    )
    assert render(Stopped("a", NINE, NINE_OH_FIVE, 300_000)) == (
        'Timer "a" stopped.\n'
        "Started:  9:00:00 AM\n"
        "Stopped:  9:05:00 AM\n"
        "Elapsed:  5m 0s"
    )


def test_render_listings() -> None:
    """Test listing and stop-all summaries."""
    entries = (
        TimerEntry("a", NINE, 300_000),
        TimerEntry("b", NINE_OH_FIVE, 0),
    )
    assert render(NoTimers()) == "No timers are running."
    assert render(TimerList(entries)) == (
        "Running timers (2):\n"
        '- "a"  started 9:00:00 AM  (5m 0s)\n'
        '- "b"  started 9:05:00 AM  (0s)'
    )
    assert render(StoppedAll(NINE_OH_FIVE, entries)) == (
        "Stopped 2 timer(s):\n"
        '- "a"  9:00:00 AM → 9:05:00 AM  (5m 0s)\n'
        '- "b"  9:05:00 AM → 9:05:00 AM  (0s)'
    )


def test_render_rename() -> None:
    """Test rename messages."""
    assert render(Renamed("a", "b")) == 'Timer renamed from "a" to "b".'
    assert render(RenameRejected("b")) == (
        'A timer named "b" is already running. '
        "Stop it first or choose a different name."
    )


def test_render_switch() -> None:
    """Test both halves of a switch summary."""
    stopped = Stopped("a", NINE, NINE_OH_FIVE, 300_000)
    assert render(Switched(stopped, Started("b", NINE_OH_FIVE))) == (
        'Stopped "a" (5m 0s).\nStarted "b" at 9:05:00 AM.'
    )
    assert render(Switched(NotRunning("default"), AlreadyRunning("b", NINE))) == (
        'No timer named "default" was running.\n'
        'Timer "b" is already running (started at 9:00:00 AM).'
    )


def test_render_unknown_outcome() -> None:
    """Test rendering something that is not an outcome."""
    with pytest.raises(TypeError):
        render("not an outcome")


def test_format_clock_uses_local_time_for_aware_instants() -> None:
    """Test aware instants are shown in the local time zone."""
    instant = datetime(2024, 3, 1, 14, 0, 0, tzinfo=timezone.utc)
    local = instant.astimezone().replace(tzinfo=None)
    assert format_clock(instant) == format_clock(local)
