"""Personal record detection over set history.

Sets carry no timestamp of their own; they are ordered by their parent
workout's ``created_at`` and then by set number, and a record is
"achieved" at that workout's creation instant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Sequence

from fitness_analytics.models.enums import ExerciseType, RecordKind
from fitness_analytics.models.personal_record import PersonalRecord
from fitness_analytics.models.records import ExerciseEvent, SetEvent, WorkoutEvent

logger = logging.getLogger(__name__)

# Epley (1985) estimate is only meaningful for low-rep sets
MAX_REPS_FOR_ONE_REP_MAX = 12


def estimate_one_rep_max(weight: float, reps: int) -> float | None:
    """Epley one-rep-max estimate: ``weight × (1 + reps / 30)``.

    Returns the weight itself for a single rep, and None when the set can't
    produce a sensible estimate (no positive load, or too many reps).
    """
    if weight <= 0 or reps <= 0 or reps > MAX_REPS_FOR_ONE_REP_MAX:
        return None
    if reps == 1:
        return weight
    return weight * (1 + reps / 30)


@dataclass(frozen=True)
class _Metric:
    """How one record kind reads its value off a set."""

    kind: RecordKind
    suffix: str
    extract: Callable[[SetEvent], float | None]


def _volume(s: SetEvent) -> float | None:
    if s.reps is None or s.weight is None:
        return None
    return float(s.reps * s.weight)


def _one_rep_max(s: SetEvent) -> float | None:
    if s.reps is None or s.weight is None:
        return None
    return estimate_one_rep_max(s.weight, s.reps)


def _as_float(value: float | int | None) -> float | None:
    return None if value is None else float(value)


_MAX_WEIGHT = _Metric(RecordKind.MAX_WEIGHT, "weight", lambda s: _as_float(s.weight))
_MAX_REPS = _Metric(RecordKind.MAX_REPS, "reps", lambda s: _as_float(s.reps))
_MAX_VOLUME = _Metric(RecordKind.MAX_VOLUME, "volume", _volume)
_MAX_DURATION = _Metric(RecordKind.MAX_DURATION, "duration", lambda s: _as_float(s.duration))
_MAX_DISTANCE = _Metric(RecordKind.MAX_DISTANCE, "distance", lambda s: _as_float(s.distance))

_METRICS: tuple[_Metric, ...] = (
    _MAX_WEIGHT,
    _MAX_REPS,
    _MAX_VOLUME,
    _MAX_DURATION,
    _MAX_DISTANCE,
)

_ONE_REP_MAX = _Metric(RecordKind.ONE_REP_MAX, "1rm", _one_rep_max)

# Metric checked for a single new set, by exercise type
_PRIMARY_METRIC: dict[ExerciseType, _Metric] = {
    ExerciseType.STRENGTH: _MAX_WEIGHT,
    ExerciseType.BODYWEIGHT: _MAX_REPS,
    ExerciseType.CARDIO: _MAX_DURATION,
    ExerciseType.TIME_BASED: _MAX_DURATION,
    ExerciseType.CUSTOM: _MAX_VOLUME,
}


def _metrics_for(exercise_type: ExerciseType) -> tuple[_Metric, ...]:
    if exercise_type == ExerciseType.STRENGTH:
        return _METRICS + (_ONE_REP_MAX,)
    return _METRICS


def _build_record(
    metric: _Metric,
    set_event: SetEvent,
    exercise: ExerciseEvent,
    value: float,
    previous: float | None,
    achieved_at: datetime,
) -> PersonalRecord:
    return PersonalRecord(
        id=f"{set_event.id}_{metric.suffix}",
        user_id=set_event.user_id,
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        exercise_type=exercise.exercise_type,
        record_kind=metric.kind,
        value=value,
        previous_value=previous,
        achieved_at=achieved_at,
        workout_id=set_event.workout_id,
        set_id=set_event.id,
    )


def detect_personal_records(
    workouts: Sequence[WorkoutEvent],
    exercises: Sequence[ExerciseEvent],
    sets: Sequence[SetEvent],
) -> list[PersonalRecord]:
    """Walk each exercise's sets chronologically and emit every record broken.

    The first value seen for a kind is a record with no previous value; a
    later set only sets a record by strictly exceeding the running best.

    Args:
        workouts: Parent workouts, used to order sets and stamp records.
        exercises: Exercises whose sets are scanned.
        sets: Set history. Sets of unknown workouts or exercises are skipped.

    Returns:
        Records in per-exercise chronological order.
    """
    created = {w.id: w.created_at for w in workouts}
    sets_by_exercise: dict[str, list[SetEvent]] = {}
    for set_event in sets:
        if set_event.workout_id in created:
            sets_by_exercise.setdefault(set_event.exercise_id, []).append(set_event)

    records: list[PersonalRecord] = []
    for exercise in exercises:
        history = sorted(
            sets_by_exercise.get(exercise.id, ()),
            key=lambda s: (created[s.workout_id], s.set_number),
        )
        best: dict[RecordKind, float] = {}
        for set_event in history:
            for metric in _metrics_for(exercise.exercise_type):
                value = metric.extract(set_event)
                if value is None:
                    continue
                previous = best.get(metric.kind)
                if previous is not None and value <= previous:
                    continue
                records.append(
                    _build_record(
                        metric, set_event, exercise, value, previous,
                        created[set_event.workout_id],
                    )
                )
                best[metric.kind] = value

    logger.debug("Detected %d personal records across %d exercises", len(records), len(exercises))
    return records


def check_for_new_pr(
    set_event: SetEvent,
    exercise: ExerciseEvent,
    history: Sequence[SetEvent],
    achieved_at: datetime,
) -> PersonalRecord | None:
    """Check a freshly logged set against the exercise's previous sets.

    The metric depends on the exercise type: weight for strength, reps for
    bodyweight, duration for cardio and time-based, volume for custom.
    *set_event* itself is excluded from *history* by id.

    Returns:
        A PersonalRecord if the set beats every previous value, else None.
    """
    metric = _PRIMARY_METRIC[exercise.exercise_type]
    value = metric.extract(set_event)
    if value is None:
        return None

    previous: float | None = None
    for past in history:
        if past.exercise_id != exercise.id or past.id == set_event.id:
            continue
        past_value = metric.extract(past)
        if past_value is not None and (previous is None or past_value > previous):
            previous = past_value
    if previous is not None and value <= previous:
        return None

    return _build_record(metric, set_event, exercise, value, previous, achieved_at)
