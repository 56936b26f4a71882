"""Aggregate analytics value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.enums import ExerciseType


@dataclass(frozen=True)
class WorkoutAnalyticsSummary:
    """Totals for the workouts created inside ``date_range``.

    ``exercise_type_breakdown`` is keyed by ExerciseType in first-seen order
    and only holds types that occurred; use ``count_for()`` for a zero default.
    """

    user_id: str
    date_range: DateRange
    total_workouts: int = 0
    total_sets: int = 0
    total_volume: float = 0.0
    total_duration: int = 0  # seconds
    exercise_type_breakdown: Mapping[ExerciseType, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    completed_workout_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def most_used_exercise_type(self) -> ExerciseType | None:
        """Type with the highest count; ties go to the type seen first."""
        best: ExerciseType | None = None
        best_count = 0
        for exercise_type, count in self.exercise_type_breakdown.items():
            if best is None or count > best_count:
                best, best_count = exercise_type, count
        return best

    def count_for(self, exercise_type: ExerciseType) -> int:
        return self.exercise_type_breakdown.get(exercise_type, 0)

    @property
    def average_workout_duration(self) -> float:
        """Average duration per workout in minutes."""
        if self.total_workouts == 0:
            return 0.0
        return self.total_duration / self.total_workouts / 60.0

    @property
    def average_sets_per_workout(self) -> float:
        if self.total_workouts == 0:
            return 0.0
        return self.total_sets / self.total_workouts


@dataclass(frozen=True)
class KeyStatistics:
    """Dashboard headline numbers for a date range."""

    total_workouts: int
    total_sets: int
    total_volume: float
    average_duration: float  # minutes per workout
    new_prs: int
    most_used_exercise_type: str  # display name, or "None"
    completion_percentage: float
    workouts_per_week: float
