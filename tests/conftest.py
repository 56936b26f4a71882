"""Shared test fixtures: a pinned clock, record factories and a small training history."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable

import pytest

from fitness_analytics.clock import FixedClock
from fitness_analytics.engines.service import WorkoutHistory
from fitness_analytics.models.enums import ExerciseType
from fitness_analytics.models.records import ExerciseEvent, SetEvent, WorkoutEvent

USER_ID = "user-1"


@pytest.fixture
def clock() -> FixedClock:
    """Wednesday 12 June 2024, noon."""
    return FixedClock(date(2024, 6, 12))


@pytest.fixture
def make_workout() -> Callable[..., WorkoutEvent]:
    def _make(workout_id: str, created_at: datetime, **overrides) -> WorkoutEvent:
        fields = dict(
            id=workout_id,
            name=f"Workout {workout_id}",
            order_index=0,
            created_at=created_at,
            user_id=USER_ID,
            week_id="week-1",
            program_id="program-1",
        )
        fields.update(overrides)
        return WorkoutEvent(**fields)

    return _make


@pytest.fixture
def make_exercise() -> Callable[..., ExerciseEvent]:
    def _make(
        exercise_id: str,
        workout_id: str,
        exercise_type: ExerciseType = ExerciseType.STRENGTH,
        **overrides,
    ) -> ExerciseEvent:
        fields = dict(
            id=exercise_id,
            name=f"Exercise {exercise_id}",
            exercise_type=exercise_type,
            order_index=0,
            user_id=USER_ID,
            workout_id=workout_id,
            week_id="week-1",
            program_id="program-1",
        )
        fields.update(overrides)
        return ExerciseEvent(**fields)

    return _make


@pytest.fixture
def make_set() -> Callable[..., SetEvent]:
    def _make(
        set_id: str,
        exercise_id: str,
        workout_id: str,
        set_number: int = 1,
        **metrics,
    ) -> SetEvent:
        return SetEvent(
            id=set_id,
            set_number=set_number,
            user_id=USER_ID,
            exercise_id=exercise_id,
            workout_id=workout_id,
            week_id="week-1",
            program_id="program-1",
            **metrics,
        )

    return _make


@pytest.fixture
def history(make_workout, make_exercise, make_set) -> WorkoutHistory:
    """Three June workouts (Jun 10, 11, 12) and one from May.

    w1 (Jun 10): bench press 3 sets at 100/100/105kg, all checked
    w2 (Jun 11): bench press 1 set at 110kg (unchecked), a 20-minute run
    w3 (Jun 12): push-ups 2 sets of 20 and 25 reps, first checked
    w0 (May 20): bench press 1 set at 90kg, checked
    """
    workouts = (
        make_workout("w0", datetime(2024, 5, 20, 18, 0)),
        make_workout("w1", datetime(2024, 6, 10, 7, 30)),
        make_workout("w2", datetime(2024, 6, 11, 7, 30)),
        make_workout("w3", datetime(2024, 6, 12, 8, 0)),
    )
    exercises = (
        make_exercise("e0", "w0", ExerciseType.STRENGTH, name="Bench Press"),
        make_exercise("e1", "w1", ExerciseType.STRENGTH, name="Bench Press"),
        make_exercise("e2", "w2", ExerciseType.STRENGTH, name="Bench Press"),
        make_exercise("e3", "w2", ExerciseType.CARDIO, name="Run"),
        make_exercise("e4", "w3", ExerciseType.BODYWEIGHT, name="Push-ups"),
    )
    sets = (
        make_set("s0", "e0", "w0", reps=5, weight=90.0, checked=True),
        make_set("s1", "e1", "w1", 1, reps=5, weight=100.0, checked=True),
        make_set("s2", "e1", "w1", 2, reps=5, weight=100.0, checked=True),
        make_set("s3", "e1", "w1", 3, reps=3, weight=105.0, checked=True),
        make_set("s4", "e2", "w2", reps=2, weight=110.0),
        make_set("s5", "e3", "w2", duration=1200, distance=4000.0, checked=True),
        make_set("s6", "e4", "w3", 1, reps=20, checked=True),
        make_set("s7", "e4", "w3", 2, reps=25),
    )
    return WorkoutHistory(user_id=USER_ID, workouts=workouts, exercises=exercises, sets=sets)
