"""Data models for the fitness analytics core."""

from fitness_analytics.models.enums import (
    ActivityMeasure,
    ExerciseType,
    HeatmapIntensity,
    HeatmapTimeframe,
    RecordKind,
)
from fitness_analytics.models.records import (
    ExerciseEvent,
    SetEvent,
    WorkoutEvent,
    validate_set,
)
from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.analytics import KeyStatistics, WorkoutAnalyticsSummary
from fitness_analytics.models.heatmap import ActivityHeatmapSummary, HeatmapDay
from fitness_analytics.models.layout import HeatmapLayoutConfig
from fitness_analytics.models.personal_record import PersonalRecord

__all__ = [
    "ActivityHeatmapSummary",
    "ActivityMeasure",
    "DateRange",
    "ExerciseEvent",
    "ExerciseType",
    "HeatmapDay",
    "HeatmapIntensity",
    "HeatmapLayoutConfig",
    "HeatmapTimeframe",
    "KeyStatistics",
    "PersonalRecord",
    "RecordKind",
    "SetEvent",
    "WorkoutAnalyticsSummary",
    "WorkoutEvent",
    "validate_set",
]
