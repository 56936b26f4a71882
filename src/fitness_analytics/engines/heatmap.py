"""ActivityHeatmapEngine — folds workout history into per-day activity and streaks."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from types import MappingProxyType
from typing import Iterable, Sequence

from fitness_analytics.clock import Clock, resolve_clock
from fitness_analytics.math.calendar import to_day
from fitness_analytics.math.streaks import calculate_streaks
from fitness_analytics.models.enums import ActivityMeasure
from fitness_analytics.models.heatmap import ActivityHeatmapSummary
from fitness_analytics.models.records import SetEvent, WorkoutEvent

logger = logging.getLogger(__name__)


class ActivityHeatmapEngine:
    """Builds ActivityHeatmapSummary snapshots.

    Every supplied event is bucketed on the calendar day of its workout's
    ``created_at``; the caller decides which window of history to pass in.
    What one unit of activity means is fixed per engine by ``measure``:

    * ``ActivityMeasure.WORKOUTS``: each workout adds 1 to its day.
    * ``ActivityMeasure.SETS``: each set adds 1 to its parent workout's day.

    Usage:
        engine = ActivityHeatmapEngine(clock=FixedClock(date(2024, 6, 1)))
        summary = engine.from_events("user-1", 2024, workouts)
        days = summary.get_heatmap_days()
    """

    def __init__(
        self,
        clock: Clock | None = None,
        measure: ActivityMeasure = ActivityMeasure.WORKOUTS,
    ) -> None:
        self.clock = resolve_clock(clock)
        self.measure = measure

    def from_events(
        self,
        user_id: str,
        year: int,
        workouts: Sequence[WorkoutEvent],
        sets: Sequence[SetEvent] | None = None,
    ) -> ActivityHeatmapSummary:
        """Fold events into a heatmap summary.

        Args:
            user_id: Owner of the history.
            year: Year rendered by ``get_heatmap_days()``. Streaks and lookups
                cover the whole supplied history regardless.
            workouts: Workouts to bucket.
            sets: Sets to bucket when measuring by sets. Sets whose workout is
                not among *workouts* are ignored.

        Returns:
            A frozen ActivityHeatmapSummary.
        """
        if self.measure == ActivityMeasure.SETS:
            counts = self._count_sets(workouts, sets or ())
        else:
            counts = Counter(to_day(w.created_at) for w in workouts)

        daily_counts = {day: n for day, n in counts.items() if n > 0}
        streaks = calculate_streaks(daily_counts.keys(), self.clock.today())

        logger.debug(
            "Heatmap for %s: %d active days, current streak %d, longest %d",
            user_id,
            len(daily_counts),
            streaks.current,
            streaks.longest,
        )

        return ActivityHeatmapSummary(
            user_id=user_id,
            year=year,
            daily_counts=MappingProxyType(daily_counts),
            total_count=sum(daily_counts.values()),
            current_streak=streaks.current,
            longest_streak=streaks.longest,
            measure=self.measure,
        )

    @staticmethod
    def _count_sets(
        workouts: Iterable[WorkoutEvent], sets: Iterable[SetEvent]
    ) -> Counter[date]:
        workout_days = {w.id: to_day(w.created_at) for w in workouts}
        counts: Counter[date] = Counter()
        orphaned = 0
        for set_event in sets:
            day = workout_days.get(set_event.workout_id)
            if day is None:
                orphaned += 1
                continue
            counts[day] += 1
        if orphaned:
            logger.debug("Ignored %d sets whose workout was not supplied", orphaned)
        return counts
