"""Raw workout history records supplied by the persistence layer.

The core only reads these. Numeric fields are folded as given; the
validation predicates on SetEvent exist so callers can reject bad data
before handing it to an engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fitness_analytics.exceptions import InvalidSetError
from fitness_analytics.formatting.display import (
    format_distance,
    format_duration,
    format_rest,
    format_weight,
)
from fitness_analytics.models.enums import ExerciseType


@dataclass(frozen=True)
class WorkoutEvent:
    """A logged workout. ``created_at`` anchors it on the calendar."""

    id: str
    name: str
    order_index: int
    created_at: datetime
    user_id: str
    week_id: str
    program_id: str
    notes: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ExerciseEvent:
    """An exercise inside a workout."""

    id: str
    name: str
    exercise_type: ExerciseType
    order_index: int
    user_id: str
    workout_id: str
    week_id: str
    program_id: str
    notes: str | None = None


@dataclass(frozen=True)
class SetEvent:
    """A single logged set.

    All numeric fields are optional. ``duration`` and ``rest_time`` are
    seconds, ``distance`` is meters, ``weight`` is kilograms.
    """

    id: str
    set_number: int
    user_id: str
    exercise_id: str
    workout_id: str
    week_id: str
    program_id: str
    reps: int | None = None
    weight: float | None = None
    duration: int | None = None
    distance: float | None = None
    rest_time: int | None = None
    checked: bool = False
    notes: str | None = None

    # -- Derived metrics ----------------------------------------------------

    @property
    def volume(self) -> float:
        """reps × weight, or 0.0 when either is missing."""
        if self.reps is None or self.weight is None:
            return 0.0
        return self.reps * self.weight

    @property
    def is_empty(self) -> bool:
        """True if none of reps/duration/distance/weight is present and positive."""
        return not any(
            value is not None and value > 0
            for value in (self.reps, self.duration, self.distance, self.weight)
        )

    # -- Validation predicates ----------------------------------------------

    @property
    def has_at_least_one_metric(self) -> bool:
        return any(
            value is not None and value > 0
            for value in (self.reps, self.duration, self.distance)
        )

    @property
    def has_valid_numeric_values(self) -> bool:
        """Every populated numeric field is non-negative."""
        return all(
            value is None or value >= 0
            for value in (self.reps, self.weight, self.duration, self.distance, self.rest_time)
        )

    def is_valid_for_exercise_type(self, exercise_type: ExerciseType) -> bool:
        if exercise_type in (ExerciseType.STRENGTH, ExerciseType.BODYWEIGHT):
            return self.reps is not None and self.reps > 0
        if exercise_type in (ExerciseType.CARDIO, ExerciseType.TIME_BASED):
            return self.duration is not None and self.duration > 0
        return self.has_at_least_one_metric

    def is_valid(self, exercise_type: ExerciseType) -> bool:
        return (
            self.has_valid_numeric_values
            and self.set_number > 0
            and self.is_valid_for_exercise_type(exercise_type)
        )

    # -- Display ------------------------------------------------------------

    @property
    def display_string(self) -> str:
        """e.g. ``"12 reps × 100kg × rest: 90s"``; ``"Empty set"`` with no positive metric."""
        if self.is_empty:
            return "Empty set"

        parts: list[str] = []
        if self.reps is not None:
            parts.append(f"{self.reps} reps")
        if self.weight is not None:
            parts.append(format_weight(self.weight))
        if self.duration is not None:
            parts.append(format_duration(self.duration))
        if self.distance is not None:
            parts.append(format_distance(self.distance))
        if self.rest_time is not None:
            parts.append(format_rest(self.rest_time))
        return " × ".join(parts)


def validate_set(set_event: SetEvent, exercise_type: ExerciseType) -> SetEvent:
    """Return *set_event* unchanged, or raise InvalidSetError.

    Raises:
        InvalidSetError: negative numeric fields, a non-positive set number,
            or a missing required metric for *exercise_type*.
    """
    if not set_event.has_valid_numeric_values:
        raise InvalidSetError(
            f"Set {set_event.id} has negative numeric values", set_id=set_event.id
        )
    if set_event.set_number <= 0:
        raise InvalidSetError(
            f"Set {set_event.id} has set number {set_event.set_number}; expected >= 1",
            set_id=set_event.id,
        )
    if not set_event.is_valid_for_exercise_type(exercise_type):
        required = ", ".join(exercise_type.required_set_fields) or "at least one metric"
        raise InvalidSetError(
            f"Set {set_event.id} is missing {required} for a "
            f"{exercise_type.display_name} exercise",
            set_id=set_event.id,
        )
    return set_event
