"""Personal record value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fitness_analytics.models.enums import ExerciseType, RecordKind


@dataclass(frozen=True)
class PersonalRecord:
    """A best-ever value for one exercise and record kind.

    ``previous_value`` is None for the first record of its kind.
    """

    id: str
    user_id: str
    exercise_id: str
    exercise_name: str
    exercise_type: ExerciseType
    record_kind: RecordKind
    value: float
    achieved_at: datetime
    workout_id: str
    set_id: str
    previous_value: float | None = None

    @property
    def is_first_record(self) -> bool:
        return self.previous_value is None

    @property
    def improvement(self) -> float:
        """Gain over the previous record; the full value for a first record."""
        if self.previous_value is None:
            return self.value
        return self.value - self.previous_value
