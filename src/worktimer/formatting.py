"""Text rendering for timer outcomes."""

from datetime import datetime
from functools import singledispatch

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
    TimerList,
)


def format_elapsed(ms: int) -> str:
    """Format a duration as ``1h 2m 5s``.

    Leading zero units are dropped, seconds are always shown.

    Args:
        ms: Duration in milliseconds

    Returns:
        Human readable duration
    """
    total_seconds = ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if hours > 0 or minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")
    return " ".join(parts)


def format_clock(instant: datetime) -> str:
    """Format the local time of day, e.g. ``3:04:05 PM``."""
    if instant.tzinfo is not None:
        instant = instant.astimezone()
    return instant.strftime("%I:%M:%S %p").lstrip("0")


@singledispatch
def render(outcome: object) -> str:
    """Render a registry outcome as the message returned to the caller."""
    raise TypeError(f"Cannot render {type(outcome).__name__}")


@render.register
def _(outcome: Started) -> str:
    text = f'Timer "{outcome.label}" started at {format_clock(outcome.start_time)}.'
    if outcome.running:
        names = ", ".join(f'"{name}"' for name in outcome.running)
        text += (
            f"\n\nHeads up: you now have {len(outcome.running)} timers running "
            f"({names}). Did you forget to stop one?"
        )
    return text


@render.register
def _(outcome: AlreadyRunning) -> str:
    return (
        f'Timer "{outcome.label}" is already running '
        f"(started at {format_clock(outcome.start_time)})."
    )


@render.register
def _(outcome: NotRunning) -> str:
    return f'No timer named "{outcome.label}" is running.'


@render.register
def _(outcome: Running) -> str:
    return (
        f'Timer "{outcome.label}" is running.\n'
        f"Started:  {format_clock(outcome.start_time)}\n"
        f"Elapsed:  {format_elapsed(outcome.elapsed_ms)}"
    )


@render.register
def _(outcome: Stopped) -> str:
    return (
        f'Timer "{outcome.label}" stopped.\n'
        f"Started:  {format_clock(outcome.start_time)}\n"
        f"Stopped:  {format_clock(outcome.end_time)}\n"
        f"Elapsed:  {format_elapsed(outcome.elapsed_ms)}"
    )


@render.register
def _(outcome: NoTimers) -> str:
    return "No timers are running."


@render.register
def _(outcome: TimerList) -> str:
    lines = [
        f'- "{entry.label}"  started {format_clock(entry.start_time)}  '
        f"({format_elapsed(entry.elapsed_ms)})"
        for entry in outcome.entries
    ]
    return f"Running timers ({len(lines)}):\n" + "\n".join(lines)


@render.register
def _(outcome: StoppedAll) -> str:
    end = format_clock(outcome.end_time)
    lines = [
        f'- "{entry.label}"  {format_clock(entry.start_time)} → {end}  '
        f"({format_elapsed(entry.elapsed_ms)})"
        for entry in outcome.entries
    ]
    return f"Stopped {len(lines)} timer(s):\n" + "\n".join(lines)


@render.register
def _(outcome: Renamed) -> str:
    return f'Timer renamed from "{outcome.from_label}" to "{outcome.to_label}".'


@render.register
def _(outcome: RenameRejected) -> str:
    return (
        f'A timer named "{outcome.to_label}" is already running. '
        "Stop it first or choose a different name."
    )


@render.register
def _(outcome: Switched) -> str:
    if isinstance(outcome.stop, Stopped):
        first = (
            f'Stopped "{outcome.stop.label}" '
            f"({format_elapsed(outcome.stop.elapsed_ms)})."
        )
    else:
        first = f'No timer named "{outcome.stop.label}" was running.'

    if isinstance(outcome.start, Started):
        second = (
            f'Started "{outcome.start.label}" at '
            f"{format_clock(outcome.start.start_time)}."
        )
    else:
        second = render(outcome.start)
    return f"{first}\n{second}"
