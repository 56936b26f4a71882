"""Injectable time sources.

Everything that depends on "now" (date-range factories, heatmap layout,
current-streak detection) takes a Clock so callers can pin today.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):
    """Source of the current local, timezone-naive instant."""

    @abstractmethod
    def now(self) -> datetime:
        ...

    def today(self) -> date:
        return self.now().date()


class SystemClock(Clock):
    """Wall-clock time in the host's local calendar."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """A clock frozen at a single instant."""

    def __init__(self, instant: datetime | date) -> None:
        if not isinstance(instant, datetime):
            instant = datetime(instant.year, instant.month, instant.day, 12, 0, 0)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


def resolve_clock(clock: Clock | None) -> Clock:
    """Return *clock*, or a SystemClock when none was supplied."""
    return clock or SystemClock()
