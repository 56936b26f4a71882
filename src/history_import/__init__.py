"""History import — maps persistence exports into fitness_analytics records."""

from history_import.exceptions import (
    HistoryFileError,
    HistoryImportError,
    MalformedRecordError,
)
from history_import.loader import history_from_export, load_history
from history_import.mapper import map_exercise, map_set, map_workout

__all__ = [
    "HistoryFileError",
    "HistoryImportError",
    "MalformedRecordError",
    "history_from_export",
    "load_history",
    "map_exercise",
    "map_set",
    "map_workout",
]
