"""Pure functions mapping raw persistence documents to core records.

No I/O. Takes the camelCase dicts the persistence layer exports and
returns frozen WorkoutEvent / ExerciseEvent / SetEvent instances. Unknown
exercise types resolve to CUSTOM; unparsable optional numbers become None.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from fitness_analytics.models.enums import ExerciseType
from fitness_analytics.models.records import ExerciseEvent, SetEvent, WorkoutEvent

from history_import.exceptions import MalformedRecordError

logger = logging.getLogger(__name__)


def map_workout(raw: dict[str, Any]) -> WorkoutEvent:
    """Map a workout document. ``id`` and ``createdAt`` are required."""
    record_id = _require_id(raw, "workout")
    created_at = _parse_instant(raw.get("createdAt"))
    if created_at is None:
        raise MalformedRecordError(
            f"Workout {record_id} has no usable createdAt", "workout", record_id
        )
    return WorkoutEvent(
        id=record_id,
        name=str(raw.get("name") or ""),
        order_index=_to_int(raw.get("orderIndex")) or 0,
        created_at=created_at,
        updated_at=_parse_instant(raw.get("updatedAt")),
        user_id=str(raw.get("userId") or ""),
        week_id=str(raw.get("weekId") or ""),
        program_id=str(raw.get("programId") or ""),
        notes=raw.get("notes"),
    )


def map_exercise(raw: dict[str, Any]) -> ExerciseEvent:
    record_id = _require_id(raw, "exercise")
    raw_type = raw.get("exerciseType")
    exercise_type = ExerciseType.from_string(str(raw_type or "custom"))
    if raw_type and exercise_type == ExerciseType.CUSTOM and str(raw_type).lower() != "custom":
        logger.warning("Unknown exercise type %r on %s, using custom", raw_type, record_id)
    return ExerciseEvent(
        id=record_id,
        name=str(raw.get("name") or ""),
        exercise_type=exercise_type,
        order_index=_to_int(raw.get("orderIndex")) or 0,
        user_id=str(raw.get("userId") or ""),
        workout_id=str(raw.get("workoutId") or ""),
        week_id=str(raw.get("weekId") or ""),
        program_id=str(raw.get("programId") or ""),
        notes=raw.get("notes"),
    )


def map_set(raw: dict[str, Any]) -> SetEvent:
    record_id = _require_id(raw, "set")
    set_number = _to_int(raw.get("setNumber"))
    return SetEvent(
        id=record_id,
        set_number=set_number if set_number is not None else 1,
        reps=_to_int(raw.get("reps")),
        weight=_to_float(raw.get("weight")),
        duration=_to_int(raw.get("duration")),
        distance=_to_float(raw.get("distance")),
        rest_time=_to_int(raw.get("restTime")),
        checked=_to_flag(raw.get("checked")),
        notes=raw.get("notes"),
        user_id=str(raw.get("userId") or ""),
        exercise_id=str(raw.get("exerciseId") or ""),
        workout_id=str(raw.get("workoutId") or ""),
        week_id=str(raw.get("weekId") or ""),
        program_id=str(raw.get("programId") or ""),
    )


# ---------------------------------------------------------------------------
# Internal field parsers, all tolerant of None
# ---------------------------------------------------------------------------


def _require_id(raw: dict[str, Any], kind: str) -> str:
    if not isinstance(raw, dict):
        raise MalformedRecordError(f"A {kind} record is not an object: {raw!r}", kind)
    record_id = raw.get("id")
    if not record_id:
        raise MalformedRecordError(f"A {kind} record has no id", kind)
    return str(record_id)


def _parse_instant(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string, epoch seconds, or a ``{"_seconds": ...}`` timestamp.

    Timezone-aware values are converted to naive local time.
    """
    if value is None:
        return None
    try:
        if isinstance(value, dict):
            value = value.get("_seconds", value.get("seconds"))
            if value is None:
                return None
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value)
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except (TypeError, ValueError, OverflowError, OSError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _to_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-integer value %r", value)
        return None


def _to_flag(value: Any) -> bool:
    """Real booleans and the strings ``"true"``/``"false"``; anything else is False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    logger.warning("Ignoring non-boolean flag %r", value)
    return False


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric value %r", value)
        return None
