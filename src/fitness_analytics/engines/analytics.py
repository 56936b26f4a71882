"""WorkoutAnalyticsEngine — aggregate totals over a date window."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Sequence

from fitness_analytics.models.analytics import WorkoutAnalyticsSummary
from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.enums import ExerciseType
from fitness_analytics.models.records import ExerciseEvent, SetEvent, WorkoutEvent

logger = logging.getLogger(__name__)


class WorkoutAnalyticsEngine:
    """Folds workouts, exercises and sets into a WorkoutAnalyticsSummary.

    Workouts are retained when ``date_range`` contains their ``created_at``.
    Exercises and sets are retained only when they belong to a retained
    workout. Numeric fields are summed as given; nothing here raises on
    empty or malformed input.
    """

    def from_workout_data(
        self,
        user_id: str,
        date_range: DateRange,
        workouts: Sequence[WorkoutEvent],
        exercises: Sequence[ExerciseEvent],
        sets: Sequence[SetEvent],
    ) -> WorkoutAnalyticsSummary:
        retained = [w for w in workouts if date_range.contains(w.created_at)]
        retained_ids = {w.id for w in retained}

        breakdown: dict[ExerciseType, int] = {}
        for exercise in exercises:
            if exercise.workout_id not in retained_ids:
                continue
            breakdown[exercise.exercise_type] = breakdown.get(exercise.exercise_type, 0) + 1

        total_sets = 0
        total_volume = 0.0
        total_duration = 0
        for set_event in sets:
            if set_event.workout_id not in retained_ids:
                continue
            total_sets += 1
            total_volume += set_event.volume
            if set_event.duration is not None:
                total_duration += set_event.duration

        logger.debug(
            "Analytics for %s: %d/%d workouts in range, %d sets",
            user_id,
            len(retained),
            len(workouts),
            total_sets,
        )

        return WorkoutAnalyticsSummary(
            user_id=user_id,
            date_range=date_range,
            total_workouts=len(retained),
            total_sets=total_sets,
            total_volume=total_volume,
            total_duration=total_duration,
            exercise_type_breakdown=MappingProxyType(breakdown),
            completed_workout_ids=tuple(w.id for w in retained),
        )
