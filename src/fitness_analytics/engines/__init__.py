"""Analytics engines — pure folds from record lists to summary value objects."""

from fitness_analytics.engines.analytics import WorkoutAnalyticsEngine
from fitness_analytics.engines.heatmap import ActivityHeatmapEngine
from fitness_analytics.engines.personal_records import (
    check_for_new_pr,
    detect_personal_records,
    estimate_one_rep_max,
)
from fitness_analytics.engines.service import AnalyticsService, WorkoutHistory

__all__ = [
    "ActivityHeatmapEngine",
    "AnalyticsService",
    "WorkoutAnalyticsEngine",
    "WorkoutHistory",
    "check_for_new_pr",
    "detect_personal_records",
    "estimate_one_rep_max",
]
