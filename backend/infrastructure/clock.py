"""
Clock abstraction for time operations.

Status timestamps, request ids and sync log entries all read the time through
a Clock so tests can pin it.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """Abstract clock interface."""

    @abstractmethod
    def now(self) -> datetime:
        """Get current UTC datetime."""
        pass

    def now_unix(self) -> int:
        """Get current time as Unix timestamp."""
        return int(self.now().timestamp())


class SystemClock(Clock):
    """Real system clock implementation."""

    def now(self) -> datetime:
        return datetime.now(tz=timezone.utc)


class FakeClock(Clock):
    """
    Fake clock for testing.
    Time can be set and advanced manually.
    """

    def __init__(self, initial: datetime = None):
        if initial is None:
            initial = datetime(2025, 3, 3, 9, 30, 0, tzinfo=timezone.utc)
        self._current = initial

    def now(self) -> datetime:
        return self._current

    def set(self, dt: datetime) -> None:
        """Set current time."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        self._current = dt

    def advance(self, **delta) -> None:
        """Advance time, e.g. advance(seconds=5) or advance(milliseconds=1)."""
        self._current += timedelta(**delta)
