"""Heatmap grid geometry for each timeframe.

Computes rows, columns and date bounds a renderer needs; produces no
day data itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from fitness_analytics.clock import Clock, resolve_clock
from fitness_analytics.math.calendar import DAYS_PER_WEEK, month_rows, year_rows
from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.enums import (
    ROLLING_WINDOW_DAYS,
    WEEKDAY_LABELS,
    YEAR_VIEW_MAX_VISIBLE_ROWS,
    HeatmapTimeframe,
)

# A rolling window is laid out in fixed rows, not aligned to Monday
_ROLLING_WINDOW_ROWS = math.ceil(ROLLING_WINDOW_DAYS / DAYS_PER_WEEK)


@dataclass(frozen=True)
class HeatmapLayoutConfig:
    """Grid geometry for a heatmap timeframe. Columns run Monday to Sunday."""

    timeframe: HeatmapTimeframe
    rows: int
    start_date: datetime
    end_date: datetime
    columns: int = DAYS_PER_WEEK
    column_labels: tuple[str, ...] = field(default=WEEKDAY_LABELS)
    show_month_labels: bool = False
    enable_vertical_scroll: bool = False
    max_visible_rows: int | None = None

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    @classmethod
    def for_timeframe(
        cls, timeframe: HeatmapTimeframe, clock: Clock | None = None
    ) -> HeatmapLayoutConfig:
        """Build the grid geometry for *timeframe* relative to the clock's today."""
        clock = resolve_clock(clock)
        bounds = DateRange.for_timeframe(timeframe, clock)

        if timeframe == HeatmapTimeframe.THIS_WEEK:
            return cls(
                timeframe=timeframe,
                rows=1,
                start_date=bounds.start,
                end_date=bounds.end,
            )

        if timeframe == HeatmapTimeframe.THIS_MONTH:
            return cls(
                timeframe=timeframe,
                rows=month_rows(bounds.start.year, bounds.start.month),
                start_date=bounds.start,
                end_date=bounds.end,
            )

        if timeframe == HeatmapTimeframe.LAST_30_DAYS:
            return cls(
                timeframe=timeframe,
                rows=_ROLLING_WINDOW_ROWS,
                start_date=bounds.start,
                end_date=bounds.end,
            )

        return cls(
            timeframe=timeframe,
            rows=year_rows(bounds.start.year),
            start_date=bounds.start,
            end_date=bounds.end,
            show_month_labels=True,
            enable_vertical_scroll=True,
            max_visible_rows=YEAR_VIEW_MAX_VISIBLE_ROWS,
        )
