"""Activity heatmap value objects: per-day cells and the yearly summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

from fitness_analytics.math.calendar import date_sequence, to_day, year_days
from fitness_analytics.models.enums import ActivityMeasure, HeatmapIntensity


@dataclass(frozen=True)
class HeatmapDay:
    """One calendar cell of the heatmap."""

    date: date
    activity_count: int
    intensity: HeatmapIntensity


@dataclass(frozen=True)
class ActivityHeatmapSummary:
    """Per-day activity counts plus streaks for one user.

    ``daily_counts`` only holds days with activity; every other day reads
    as 0 / NONE. Lookups work for any date, inside ``year`` or not.
    """

    user_id: str
    year: int
    daily_counts: Mapping[date, int] = field(default_factory=lambda: MappingProxyType({}))
    total_count: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    measure: ActivityMeasure = ActivityMeasure.WORKOUTS

    @property
    def active_days(self) -> int:
        return sum(1 for count in self.daily_counts.values() if count > 0)

    def get_activity_count_for_date(self, day: date | datetime) -> int:
        return self.daily_counts.get(to_day(day), 0)

    def get_set_count_for_date(self, day: date | datetime) -> int:
        """Alias kept for set-based callers; the unit follows ``measure``."""
        return self.get_activity_count_for_date(day)

    def get_intensity_for_date(self, day: date | datetime) -> HeatmapIntensity:
        return HeatmapIntensity.from_count(self.get_activity_count_for_date(day))

    def _cell(self, day: date) -> HeatmapDay:
        count = self.daily_counts.get(day, 0)
        return HeatmapDay(
            date=day,
            activity_count=count,
            intensity=HeatmapIntensity.from_count(count),
        )

    def get_heatmap_days(self) -> list[HeatmapDay]:
        """Dense, ascending cells for every day of ``year`` (365 or 366)."""
        return [self._cell(day) for day in year_days(self.year)]

    def get_days_in_range(self, start: date | datetime, end: date | datetime) -> list[HeatmapDay]:
        """Dense, ascending cells for every day from *start* to *end* inclusive."""
        return [self._cell(day) for day in date_sequence(to_day(start), to_day(end))]
