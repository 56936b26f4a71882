"""Tests for WorkoutAnalyticsEngine aggregation over a date window."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from fitness_analytics.engines.analytics import WorkoutAnalyticsEngine
from fitness_analytics.models.date_range import DateRange
from fitness_analytics.models.enums import ExerciseType


@pytest.fixture
def engine() -> WorkoutAnalyticsEngine:
    return WorkoutAnalyticsEngine()


class TestTotals:
    def test_june_history(self, engine, clock, history) -> None:
        summary = engine.from_workout_data(
            history.user_id,
            DateRange.this_month(clock),
            history.workouts,
            history.exercises,
            history.sets,
        )
        assert summary.total_workouts == 3
        assert summary.total_sets == 7
        assert summary.total_volume == pytest.approx(1535.0)
        assert summary.total_duration == 1200
        assert summary.completed_workout_ids == ("w1", "w2", "w3")

    def test_averages(self, engine, clock, history) -> None:
        summary = engine.from_workout_data(
            history.user_id,
            DateRange.this_month(clock),
            history.workouts,
            history.exercises,
            history.sets,
        )
        assert summary.average_workout_duration == pytest.approx(1200 / 3 / 60)
        assert summary.average_sets_per_workout == pytest.approx(7 / 3)

    def test_single_set_volume(self, engine, make_workout, make_set) -> None:
        workouts = [make_workout("w", datetime(2024, 6, 1, 9))]
        sets = [
            make_set("s1", "e", "w", reps=10, weight=100.0),
            make_set("s2", "e", "w", 2, reps=10),
        ]
        summary = engine.from_workout_data(
            "user-1",
            DateRange(datetime(2024, 6, 1), datetime(2024, 6, 2)),
            workouts,
            [],
            sets,
        )
        assert summary.total_volume == 1000.0
        assert summary.total_sets == 2

    def test_sets_of_excluded_workouts_ignored(self, engine, history) -> None:
        may = DateRange(datetime(2024, 5, 1), datetime(2024, 5, 31, 23, 59, 59))
        summary = engine.from_workout_data(
            history.user_id, may, history.workouts, history.exercises, history.sets
        )
        assert summary.total_workouts == 1
        assert summary.total_sets == 1
        assert summary.total_volume == 450.0
        assert dict(summary.exercise_type_breakdown) == {ExerciseType.STRENGTH: 1}


class TestDegenerateInput:
    def test_empty(self, engine, clock) -> None:
        summary = engine.from_workout_data("user-1", DateRange.this_week(clock), [], [], [])
        assert summary.total_workouts == 0
        assert summary.total_sets == 0
        assert summary.total_volume == 0.0
        assert summary.most_used_exercise_type is None
        assert summary.average_workout_duration == 0.0
        assert summary.average_sets_per_workout == 0.0

    def test_inverted_range_retains_nothing(self, engine, history) -> None:
        inverted = DateRange(datetime(2024, 12, 31), datetime(2024, 1, 1))
        summary = engine.from_workout_data(
            history.user_id, inverted, history.workouts, history.exercises, history.sets
        )
        assert summary.total_workouts == 0

    def test_negative_numbers_fold_without_error(self, engine, make_workout, make_set) -> None:
        workouts = [make_workout("w", datetime(2024, 6, 1, 9))]
        sets = [make_set("s", "e", "w", reps=-5, weight=10.0, duration=-30)]
        summary = engine.from_workout_data(
            "user-1",
            DateRange(datetime(2024, 6, 1), datetime(2024, 6, 2)),
            workouts,
            [],
            sets,
        )
        assert summary.total_volume == -50.0
        assert summary.total_duration == -30


class TestBreakdown:
    def test_counts_by_type(self, engine, clock, history) -> None:
        summary = engine.from_workout_data(
            history.user_id,
            DateRange.this_month(clock),
            history.workouts,
            history.exercises,
            history.sets,
        )
        assert summary.count_for(ExerciseType.STRENGTH) == 2
        assert summary.count_for(ExerciseType.CARDIO) == 1
        assert summary.count_for(ExerciseType.BODYWEIGHT) == 1
        assert summary.count_for(ExerciseType.TIME_BASED) == 0
        assert summary.most_used_exercise_type == ExerciseType.STRENGTH

    def test_tie_goes_to_first_seen(self, engine, make_workout, make_exercise) -> None:
        workouts = [make_workout("w", datetime(2024, 6, 1, 9))]
        exercises = [
            make_exercise("e1", "w", ExerciseType.CARDIO),
            make_exercise("e2", "w", ExerciseType.STRENGTH),
        ]
        summary = engine.from_workout_data(
            "user-1",
            DateRange(datetime(2024, 6, 1), datetime(2024, 6, 2)),
            workouts,
            exercises,
            [],
        )
        assert list(summary.exercise_type_breakdown) == [
            ExerciseType.CARDIO,
            ExerciseType.STRENGTH,
        ]
        assert summary.most_used_exercise_type == ExerciseType.CARDIO


class TestScaling:
    def test_thousand_workouts(self, engine, clock, make_workout, make_exercise, make_set) -> None:
        start = datetime(2024, 1, 1)
        workouts = [make_workout(f"w{i}", start + timedelta(hours=i)) for i in range(1000)]
        exercises = [make_exercise(f"e{i}", f"w{i}") for i in range(1000)]
        # reps cycle 1, 2, 3 at 10kg: each full cycle adds 60kg of volume
        sets = [
            make_set(f"s{i}", f"e{i // 3}", f"w{i // 3}", i % 3 + 1, reps=i % 3 + 1, weight=10.0)
            for i in range(3000)
        ]
        summary = engine.from_workout_data(
            "user-1", DateRange.this_year(clock), workouts, exercises, sets
        )
        assert summary.total_workouts == 1000
        assert summary.total_sets == 3000
        assert summary.total_volume == 60_000.0
        assert summary.count_for(ExerciseType.STRENGTH) == 1000
