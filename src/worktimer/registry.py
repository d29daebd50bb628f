"""In-memory timer registry.

The registry maps a label to the instant its timer was started. A label is
present only while its timer runs; stopping a timer removes it. Every
operation returns a tagged outcome describing what happened instead of
raising, and rendering those outcomes to text is left to
:mod:`worktimer.formatting`.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from threading import Lock

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "default"
WARNING_THRESHOLD = 3

_MILLISECOND = timedelta(milliseconds=1)


def resolve_label(label: str | None) -> str:
    """Return the label to use for an optional caller-supplied label.

    Args:
        label: Label supplied by the caller, possibly missing or empty

    Returns:
        The label itself, or ``"default"`` when none was given
    """
    return label or DEFAULT_LABEL


def elapsed_ms(start: datetime, end: datetime) -> int:
    """Whole milliseconds between two instants."""
    return (end - start) // _MILLISECOND


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _normalize(instant: datetime) -> datetime:
    # aware instants are stored in UTC so subtraction spans offset changes
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    return instant.replace(microsecond=instant.microsecond // 1000 * 1000)


@dataclass(frozen=True)
class Started:
    """A new timer was started.

    ``running`` lists every running label when starting this timer brought the
    registry to the warning threshold, otherwise it is empty.
    """

    label: str
    start_time: datetime
    running: tuple[str, ...] = ()


@dataclass(frozen=True)
class AlreadyRunning:
    """A timer with the label exists; nothing was changed."""

    label: str
    start_time: datetime


@dataclass(frozen=True)
class NotRunning:
    """No timer with the label exists."""

    label: str


@dataclass(frozen=True)
class Running:
    """Read-only status of a running timer."""

    label: str
    start_time: datetime
    elapsed_ms: int


@dataclass(frozen=True)
class Stopped:
    """A timer was stopped and removed."""

    label: str
    start_time: datetime
    end_time: datetime
    elapsed_ms: int


@dataclass(frozen=True)
class TimerEntry:
    """One line of a listing or a stop-all summary."""

    label: str
    start_time: datetime
    elapsed_ms: int


@dataclass(frozen=True)
class NoTimers:
    """The registry is empty."""


@dataclass(frozen=True)
class TimerList:
    """Every running timer, in the order they were started."""

    entries: tuple[TimerEntry, ...]


@dataclass(frozen=True)
class StoppedAll:
    """Every timer was stopped at ``end_time``."""

    end_time: datetime
    entries: tuple[TimerEntry, ...]


@dataclass(frozen=True)
class Renamed:
    """A timer moved to a new label, keeping its start time."""

    from_label: str
    to_label: str


@dataclass(frozen=True)
class RenameRejected:
    """The rename target is already running; nothing was changed."""

    to_label: str


@dataclass(frozen=True)
class Switched:
    """Outcome of stopping one timer and starting another at the same instant."""

    stop: Stopped | NotRunning
    start: Started | AlreadyRunning


Outcome = (
    Started
    | AlreadyRunning
    | NotRunning
    | Running
    | Stopped
    | NoTimers
    | TimerList
    | StoppedAll
    | Renamed
    | RenameRejected
    | Switched
)


@dataclass(eq=False)
class TimerRegistry:
    """Running timers keyed by label.

    Each public operation runs under a single lock, so a check followed by a
    mutation is never interleaved with another call.
    """

    clock: Callable[[], datetime] = utc_now
    warning_threshold: int = WARNING_THRESHOLD
    _timers: dict[str, datetime] = field(default_factory=dict, init=False, repr=False)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, label: object) -> bool:
        return label in self._timers

    @property
    def labels(self) -> tuple[str, ...]:
        """Running labels in insertion order."""
        return tuple(self._timers)

    def start_time(self, label: str) -> datetime | None:
        """Start time of a running timer, or None."""
        return self._timers.get(label)

    def _now(self) -> datetime:
        return _normalize(self.clock())

    def start_timer(self, label: str | None = None) -> Started | AlreadyRunning:
        """Start a timer unless one with the same label is running."""
        name = resolve_label(label)
        with self._lock:
            existing = self._timers.get(name)
            if existing is not None:
                return AlreadyRunning(name, existing)

            now = self._now()
            self._timers[name] = now
            logger.debug("Started timer %s at %s", name, now.isoformat())

            running: tuple[str, ...] = ()
            if len(self._timers) >= self.warning_threshold:
                running = tuple(self._timers)
            return Started(name, now, running)

    def current_timer(self, label: str | None = None) -> Running | NotRunning:
        """Report elapsed time on a timer without stopping it."""
        name = resolve_label(label)
        with self._lock:
            start = self._timers.get(name)
            if start is None:
                return NotRunning(name)
            return Running(name, start, elapsed_ms(start, self._now()))

    def stop_timer(self, label: str | None = None) -> Stopped | NotRunning:
        """Stop a timer and remove it."""
        name = resolve_label(label)
        with self._lock:
            start = self._timers.get(name)
            if start is None:
                return NotRunning(name)

            end = self._now()
            del self._timers[name]
            logger.debug("Stopped timer %s", name)
            return Stopped(name, start, end, elapsed_ms(start, end))

    def list_timers(self) -> TimerList | NoTimers:
        """List running timers, all measured against the same instant."""
        with self._lock:
            if not self._timers:
                return NoTimers()

            now = self._now()
            return TimerList(
                tuple(
                    TimerEntry(name, start, elapsed_ms(start, now))
                    for name, start in self._timers.items()
                )
            )

    def stop_all_timers(self) -> StoppedAll | NoTimers:
        """Stop every timer at one shared end instant."""
        with self._lock:
            if not self._timers:
                return NoTimers()

            end = self._now()
            entries = tuple(
                TimerEntry(name, start, elapsed_ms(start, end))
                for name, start in self._timers.items()
            )
            self._timers.clear()
            logger.debug("Stopped %d timers", len(entries))
            return StoppedAll(end, entries)

    def rename_timer(
        self, from_label: str | None = None, *, to_label: str
    ) -> Renamed | RenameRejected | NotRunning:
        """Move a running timer to a new label, keeping its start time.

        Args:
            from_label: Label of the running timer (defaults to ``"default"``)
            to_label: New label; must not belong to a running timer

        Returns:
            ``Renamed`` on success, ``NotRunning`` if there is nothing to
            rename, ``RenameRejected`` if ``to_label`` is taken
        """
        old = resolve_label(from_label)
        with self._lock:
            start = self._timers.get(old)
            if start is None:
                return NotRunning(old)
            if to_label in self._timers:
                return RenameRejected(to_label)

            self._timers[to_label] = start
            del self._timers[old]
            logger.debug("Renamed timer %s to %s", old, to_label)
            return Renamed(old, to_label)

    def switch_timer(
        self, stop_label: str | None = None, *, start_label: str
    ) -> Switched:
        """Stop one timer and start another with no gap between them.

        Stopping a timer that is not running is reported, not treated as a
        failure. A start label that is still running after the stop half is
        left alone.
        """
        old = resolve_label(stop_label)
        with self._lock:
            now = self._now()

            stop: Stopped | NotRunning
            stopped_at = self._timers.pop(old, None)
            if stopped_at is None:
                stop = NotRunning(old)
            else:
                stop = Stopped(old, stopped_at, now, elapsed_ms(stopped_at, now))
                logger.debug("Switch stopped timer %s", old)

            start: Started | AlreadyRunning
            existing = self._timers.get(start_label)
            if existing is not None:
                start = AlreadyRunning(start_label, existing)
            else:
                self._timers[start_label] = now
                start = Started(start_label, now)
                logger.debug("Switch started timer %s", start_label)

            return Switched(stop, start)

    def clear(self) -> int:
        """Drop every timer without reporting on it; returns how many were dropped."""
        with self._lock:
            count = len(self._timers)
            self._timers.clear()
            return count
