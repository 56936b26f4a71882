"""Enumerations and bucketing constants for the fitness analytics core.

Every tag the engines aggregate on is a closed enum. Free-form strings coming
from the persistence layer are resolved with the ``from_string`` helpers
before they ever reach an engine.
"""

from __future__ import annotations

from enum import IntEnum, auto


class ExerciseType(IntEnum):
    """Tracking shape of an exercise — decides which set fields matter."""

    STRENGTH = auto()
    CARDIO = auto()
    BODYWEIGHT = auto()
    CUSTOM = auto()
    TIME_BASED = auto()

    @property
    def display_name(self) -> str:
        return _EXERCISE_TYPE_LABELS[self]

    def to_map(self) -> str:
        """Wire string used by the persistence layer."""
        return _EXERCISE_TYPE_WIRE[self]

    @classmethod
    def from_string(cls, value: str) -> ExerciseType:
        """Resolve a stored type string, falling back to CUSTOM."""
        key = value.strip().lower()
        if key in ("time-based", "timebased", "time_based"):
            return cls.TIME_BASED
        for member, wire in _EXERCISE_TYPE_WIRE.items():
            if wire == key:
                return member
        return cls.CUSTOM

    @property
    def required_set_fields(self) -> tuple[str, ...]:
        """Set fields that must be populated for this exercise type."""
        if self in (ExerciseType.STRENGTH, ExerciseType.BODYWEIGHT):
            return ("reps",)
        if self in (ExerciseType.CARDIO, ExerciseType.TIME_BASED):
            return ("duration",)
        return ()

    @property
    def optional_set_fields(self) -> tuple[str, ...]:
        """Set fields that may be populated for this exercise type."""
        if self == ExerciseType.STRENGTH:
            return ("weight", "rest_time")
        if self in (ExerciseType.CARDIO, ExerciseType.TIME_BASED):
            return ("distance",)
        if self == ExerciseType.BODYWEIGHT:
            return ("rest_time",)
        return ("reps", "weight", "duration", "distance", "rest_time")


_EXERCISE_TYPE_LABELS: dict[ExerciseType, str] = {
    ExerciseType.STRENGTH: "Strength",
    ExerciseType.CARDIO: "Cardio",
    ExerciseType.BODYWEIGHT: "Bodyweight",
    ExerciseType.CUSTOM: "Custom",
    ExerciseType.TIME_BASED: "Time-based",
}

_EXERCISE_TYPE_WIRE: dict[ExerciseType, str] = {
    ExerciseType.STRENGTH: "strength",
    ExerciseType.CARDIO: "cardio",
    ExerciseType.BODYWEIGHT: "bodyweight",
    ExerciseType.CUSTOM: "custom",
    ExerciseType.TIME_BASED: "time-based",
}


class RecordKind(IntEnum):
    """Personal record classification."""

    ONE_REP_MAX = auto()
    MAX_WEIGHT = auto()
    MAX_REPS = auto()
    MAX_VOLUME = auto()
    MAX_DURATION = auto()
    MAX_DISTANCE = auto()

    @property
    def display_name(self) -> str:
        return _RECORD_KIND_LABELS[self]

    def to_map(self) -> str:
        return self.name.replace("_", "").lower()

    @classmethod
    def from_string(cls, value: str) -> RecordKind:
        """Resolve ``maxweight`` / ``max_weight`` style strings, defaulting to MAX_WEIGHT."""
        key = value.strip().lower().replace("_", "")
        for member in cls:
            if member.to_map() == key:
                return member
        return cls.MAX_WEIGHT


_RECORD_KIND_LABELS: dict[RecordKind, str] = {
    RecordKind.ONE_REP_MAX: "1RM",
    RecordKind.MAX_WEIGHT: "Max Weight",
    RecordKind.MAX_REPS: "Max Reps",
    RecordKind.MAX_VOLUME: "Volume PR",
    RecordKind.MAX_DURATION: "Max Duration",
    RecordKind.MAX_DISTANCE: "Max Distance",
}


class HeatmapIntensity(IntEnum):
    """Ordered severity levels for a day's activity count."""

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VERY_HIGH = 4

    @classmethod
    def from_count(cls, count: int) -> HeatmapIntensity:
        """Bucket a daily activity count. Each row's bounds are inclusive."""
        if count <= 0:
            return cls.NONE
        if count <= LOW_INTENSITY_MAX:
            return cls.LOW
        if count <= MEDIUM_INTENSITY_MAX:
            return cls.MEDIUM
        if count <= HIGH_INTENSITY_MAX:
            return cls.HIGH
        return cls.VERY_HIGH

    @property
    def display_name(self) -> str:
        return _INTENSITY_LABELS[self]


_INTENSITY_LABELS: dict[HeatmapIntensity, str] = {
    HeatmapIntensity.NONE: "No activity",
    HeatmapIntensity.LOW: "Light activity",
    HeatmapIntensity.MEDIUM: "Moderate activity",
    HeatmapIntensity.HIGH: "High activity",
    HeatmapIntensity.VERY_HIGH: "Very high activity",
}


class HeatmapTimeframe(IntEnum):
    """Calendar windows a heatmap grid can be laid out for."""

    THIS_WEEK = auto()
    THIS_MONTH = auto()
    LAST_30_DAYS = auto()
    THIS_YEAR = auto()

    @property
    def display_name(self) -> str:
        return _TIMEFRAME_LABELS[self]


_TIMEFRAME_LABELS: dict[HeatmapTimeframe, str] = {
    HeatmapTimeframe.THIS_WEEK: "This Week",
    HeatmapTimeframe.THIS_MONTH: "This Month",
    HeatmapTimeframe.LAST_30_DAYS: "Last 30 Days",
    HeatmapTimeframe.THIS_YEAR: "This Year",
}


class ActivityMeasure(IntEnum):
    """What a single unit of heatmap activity counts."""

    WORKOUTS = auto()
    SETS = auto()

    @classmethod
    def from_string(cls, value: str) -> ActivityMeasure:
        if value.strip().lower() == "sets":
            return cls.SETS
        return cls.WORKOUTS


# ---------------------------------------------------------------------------
# Heatmap bucket bounds (inclusive upper edge of each level)
# ---------------------------------------------------------------------------
LOW_INTENSITY_MAX = 5
MEDIUM_INTENSITY_MAX = 15
HIGH_INTENSITY_MAX = 25

# ---------------------------------------------------------------------------
# Calendar grid
# ---------------------------------------------------------------------------
WEEKDAY_LABELS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
ROLLING_WINDOW_DAYS = 30
YEAR_VIEW_MAX_VISIBLE_ROWS = 10
