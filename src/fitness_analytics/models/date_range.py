"""DateRange — an inclusive interval of instants with calendar factories."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from fitness_analytics.clock import Clock, resolve_clock
from fitness_analytics.math.calendar import (
    days_in_month,
    end_of_day,
    monday_of_week,
    start_of_day,
)
from fitness_analytics.models.enums import ROLLING_WINDOW_DAYS, HeatmapTimeframe

_SECONDS_PER_DAY = 86_400


@dataclass(frozen=True)
class DateRange:
    """Closed interval ``[start, end]`` of naive local instants.

    An inverted range (``end < start``) is not rejected: it contains nothing
    and reports a negative duration.
    """

    start: datetime
    end: datetime

    # -- Factories --------------------------------------------------------

    @classmethod
    def this_week(cls, clock: Clock | None = None) -> DateRange:
        """Monday 00:00:00 through Sunday 23:59:59 of the current week."""
        today = resolve_clock(clock).today()
        monday = monday_of_week(today)
        return cls(
            start=start_of_day(monday),
            end=end_of_day(monday + timedelta(days=6)),
        )

    @classmethod
    def this_month(cls, clock: Clock | None = None) -> DateRange:
        """Day 1 through the last calendar day of the current month."""
        today = resolve_clock(clock).today()
        last_day = date(today.year, today.month, days_in_month(today.year, today.month))
        return cls(
            start=start_of_day(date(today.year, today.month, 1)),
            end=datetime.combine(last_day, datetime.max.time()),
        )

    @classmethod
    def this_year(cls, clock: Clock | None = None) -> DateRange:
        today = resolve_clock(clock).today()
        return cls(
            start=start_of_day(date(today.year, 1, 1)),
            end=end_of_day(date(today.year, 12, 31)),
        )

    @classmethod
    def last_30_days(cls, clock: Clock | None = None) -> DateRange:
        """Rolling 30-day window: 29 days ago at midnight through end of today."""
        today = resolve_clock(clock).today()
        return cls(
            start=start_of_day(today - timedelta(days=ROLLING_WINDOW_DAYS - 1)),
            end=end_of_day(today),
        )

    @classmethod
    def for_timeframe(
        cls, timeframe: HeatmapTimeframe, clock: Clock | None = None
    ) -> DateRange:
        factories = {
            HeatmapTimeframe.THIS_WEEK: cls.this_week,
            HeatmapTimeframe.THIS_MONTH: cls.this_month,
            HeatmapTimeframe.LAST_30_DAYS: cls.last_30_days,
            HeatmapTimeframe.THIS_YEAR: cls.this_year,
        }
        return factories[timeframe](clock)

    # -- Queries ----------------------------------------------------------

    def contains(self, instant: datetime) -> bool:
        """Inclusive on both ends."""
        return self.start <= instant <= self.end

    @property
    def duration_in_days(self) -> int:
        """Whole days covered, rounded up; never below 1 for a forward range.

        Inverted ranges pass through as a negative number.
        """
        days = (self.end - self.start).total_seconds() / _SECONDS_PER_DAY
        if days < 0:
            return math.floor(days)
        return max(1, math.ceil(days))

    @property
    def start_day(self) -> date:
        return self.start.date()

    @property
    def end_day(self) -> date:
        return self.end.date()
