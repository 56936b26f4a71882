"""AnalyticsService — composes the engines over one snapshot of history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fitness_analytics.clock import Clock, resolve_clock
from fitness_analytics.engines.analytics import WorkoutAnalyticsEngine
from fitness_analytics.engines.heatmap import ActivityHeatmapEngine
from fitness_analytics.engines.personal_records import detect_personal_records
from fitness_analytics.models.analytics import KeyStatistics, WorkoutAnalyticsSummary
from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.enums import ActivityMeasure, ExerciseType
from fitness_analytics.models.heatmap import ActivityHeatmapSummary
from fitness_analytics.models.personal_record import PersonalRecord
from fitness_analytics.models.records import ExerciseEvent, SetEvent, WorkoutEvent

logger = logging.getLogger(__name__)

# How many recent records key statistics look through for new PRs
KEY_STATISTICS_PR_LIMIT = 50


@dataclass(frozen=True)
class WorkoutHistory:
    """Immutable snapshot of a user's records, as handed over by the persistence layer."""

    user_id: str
    workouts: tuple[WorkoutEvent, ...] = field(default_factory=tuple)
    exercises: tuple[ExerciseEvent, ...] = field(default_factory=tuple)
    sets: tuple[SetEvent, ...] = field(default_factory=tuple)


class AnalyticsService:
    """Answers dashboard queries from a WorkoutHistory snapshot.

    Usage:
        service = AnalyticsService(history)
        summary = service.compute_workout_analytics(DateRange.this_month())
        stats = service.compute_key_statistics(DateRange.last_30_days())
    """

    def __init__(
        self,
        history: WorkoutHistory,
        clock: Clock | None = None,
        measure: ActivityMeasure = ActivityMeasure.WORKOUTS,
    ) -> None:
        self.history = history
        self.clock = resolve_clock(clock)
        self.analytics_engine = WorkoutAnalyticsEngine()
        self.heatmap_engine = ActivityHeatmapEngine(clock=self.clock, measure=measure)

    def compute_workout_analytics(self, date_range: DateRange) -> WorkoutAnalyticsSummary:
        return self.analytics_engine.from_workout_data(
            user_id=self.history.user_id,
            date_range=date_range,
            workouts=self.history.workouts,
            exercises=self.history.exercises,
            sets=self.history.sets,
        )

    def generate_heatmap(self, year: int) -> ActivityHeatmapSummary:
        return self.heatmap_engine.from_events(
            user_id=self.history.user_id,
            year=year,
            workouts=self.history.workouts,
            sets=self.history.sets,
        )

    def get_personal_records(
        self,
        limit: int | None = None,
        exercise_type: ExerciseType | None = None,
    ) -> list[PersonalRecord]:
        """All detected records, most recent first.

        Args:
            limit: Keep at most this many records when positive.
            exercise_type: Only records for exercises of this type.
        """
        records = detect_personal_records(
            self.history.workouts, self.history.exercises, self.history.sets
        )
        if exercise_type is not None:
            records = [r for r in records if r.exercise_type == exercise_type]
        records.sort(key=lambda r: r.achieved_at, reverse=True)
        if limit is not None and limit > 0:
            records = records[:limit]
        return records

    def compute_key_statistics(self, date_range: DateRange) -> KeyStatistics:
        """Headline numbers for *date_range*.

        Completion percentage is the share of checked sets among sets of
        workouts in range; workouts per week scales by the range's length.
        """
        analytics = self.compute_workout_analytics(date_range)
        records = self.get_personal_records(limit=KEY_STATISTICS_PR_LIMIT)
        new_prs = sum(1 for r in records if date_range.contains(r.achieved_at))

        in_range = set(analytics.completed_workout_ids)
        range_sets = [s for s in self.history.sets if s.workout_id in in_range]
        completed = sum(1 for s in range_sets if s.checked)
        completion = completed / len(range_sets) * 100 if range_sets else 0.0

        weeks = date_range.duration_in_days / 7
        workouts_per_week = analytics.total_workouts / weeks if weeks > 0 else 0.0

        most_used = analytics.most_used_exercise_type
        logger.info(
            "Key statistics for %s: %d workouts, %d new PRs",
            self.history.user_id,
            analytics.total_workouts,
            new_prs,
        )
        return KeyStatistics(
            total_workouts=analytics.total_workouts,
            total_sets=analytics.total_sets,
            total_volume=analytics.total_volume,
            average_duration=analytics.average_workout_duration,
            new_prs=new_prs,
            most_used_exercise_type=most_used.display_name if most_used else "None",
            completion_percentage=completion,
            workouts_per_week=workouts_per_week,
        )
