"""Display strings for personal records."""

from __future__ import annotations

from fitness_analytics.formatting.display import (
    format_distance,
    format_duration,
    format_fixed,
    format_number,
    format_signed_delta,
    format_weight,
)
from fitness_analytics.models.enums import RecordKind
from fitness_analytics.models.personal_record import PersonalRecord

NEW_RECORD_LABEL = "New PR!"


def format_record_value(kind: RecordKind, value: float) -> str:
    """Render a record value in the unit of its kind."""
    if kind == RecordKind.MAX_WEIGHT:
        return format_weight(value)
    if kind == RecordKind.MAX_REPS:
        return f"{format_number(value)} reps"
    if kind == RecordKind.MAX_DURATION:
        return format_duration(value)
    if kind == RecordKind.MAX_DISTANCE:
        return format_distance(value)
    if kind == RecordKind.MAX_VOLUME:
        return f"{format_fixed(value, 0)} vol"
    return f"{format_fixed(value, 0)}kg (1RM)"


class PersonalRecordFormatter:
    """Improvement deltas and value strings for a PersonalRecord."""

    def __init__(self, record: PersonalRecord) -> None:
        self.record = record

    @property
    def improvement(self) -> float:
        return self.record.improvement

    @property
    def improvement_string(self) -> str:
        """``"New PR!"`` for a first record, otherwise a signed delta like ``"+5"``."""
        if self.record.previous_value is None:
            return NEW_RECORD_LABEL
        return format_signed_delta(self.record.improvement)

    @property
    def display_value(self) -> str:
        return format_record_value(self.record.record_kind, self.record.value)

    @property
    def previous_display_value(self) -> str | None:
        if self.record.previous_value is None:
            return None
        return format_record_value(self.record.record_kind, self.record.previous_value)

    def summary_line(self) -> str:
        """One-line description, e.g. ``"Bench Press — Max Weight: 105kg (+5)"``."""
        return (
            f"{self.record.exercise_name} — {self.record.record_kind.display_name}: "
            f"{self.display_value} ({self.improvement_string})"
        )
