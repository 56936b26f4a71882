"""Load a JSON history export into a WorkoutHistory snapshot.

Expected shape::

    {
        "userId": "abc",
        "workouts": [...],
        "exercises": [...],
        "sets": [...]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fitness_analytics.engines.service import WorkoutHistory

from history_import.exceptions import HistoryFileError, MalformedRecordError
from history_import.mapper import map_exercise, map_set, map_workout

logger = logging.getLogger(__name__)


def history_from_export(data: dict[str, Any], user_id: str | None = None) -> WorkoutHistory:
    """Map a decoded export dict. *user_id* overrides the export's ``userId``."""
    if not isinstance(data, dict):
        raise HistoryFileError("History export must be a JSON object")

    owner = user_id or str(data.get("userId") or "")
    workouts = tuple(map_workout(raw) for raw in _collection(data, "workouts", "workout"))
    exercises = tuple(map_exercise(raw) for raw in _collection(data, "exercises", "exercise"))
    sets = tuple(map_set(raw) for raw in _collection(data, "sets", "set"))

    logger.info(
        "Loaded history for %s: %d workouts, %d exercises, %d sets",
        owner or "<unknown>",
        len(workouts),
        len(exercises),
        len(sets),
    )
    return WorkoutHistory(user_id=owner, workouts=workouts, exercises=exercises, sets=sets)


def _collection(data: dict[str, Any], key: str, kind: str) -> list[Any]:
    records = data.get(key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise MalformedRecordError(f"History export field {key!r} must be a list", kind)
    return records


def load_history(path: Path, user_id: str | None = None) -> WorkoutHistory:
    """Read and map the export at *path*.

    Raises:
        HistoryFileError: The file is missing, unreadable, not UTF-8 or not valid JSON.
        MalformedRecordError: A record is not an object, lacks an id, or is a
            workout without createdAt.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise HistoryFileError(f"History export not found at {path}") from exc
    except UnicodeDecodeError as exc:
        raise HistoryFileError(f"History export at {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise HistoryFileError(f"History export at {path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise HistoryFileError(f"Could not read history export at {path}: {exc}") from exc
    return history_from_export(data, user_id=user_id)
