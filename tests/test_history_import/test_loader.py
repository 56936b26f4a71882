"""Tests for loading JSON history exports from disk."""

from __future__ import annotations

import json

import pytest

from history_import import (
    HistoryFileError,
    MalformedRecordError,
    history_from_export,
    load_history,
)


@pytest.fixture
def export() -> dict:
    return {
        "userId": "user-1",
        "workouts": [
            {"id": "w1", "createdAt": "2024-06-10T07:30:00", "name": "Push"},
            {"id": "w2", "createdAt": "2024-06-11T07:30:00", "name": "Pull"},
        ],
        "exercises": [
            {"id": "e1", "workoutId": "w1", "exerciseType": "strength", "name": "Bench"},
        ],
        "sets": [
            {"id": "s1", "exerciseId": "e1", "workoutId": "w1", "reps": 5, "weight": 100},
            {"id": "s2", "exerciseId": "e1", "workoutId": "w1", "setNumber": 2, "reps": 5},
        ],
    }


class TestHistoryFromExport:
    def test_maps_every_collection(self, export) -> None:
        history = history_from_export(export)
        assert history.user_id == "user-1"
        assert len(history.workouts) == 2
        assert len(history.exercises) == 1
        assert len(history.sets) == 2
        assert isinstance(history.sets, tuple)

    def test_user_override(self, export) -> None:
        assert history_from_export(export, user_id="someone-else").user_id == "someone-else"

    def test_missing_collections_are_empty(self) -> None:
        history = history_from_export({"userId": "u"})
        assert history.workouts == ()
        assert history.sets == ()

    def test_non_object_rejected(self) -> None:
        with pytest.raises(HistoryFileError):
            history_from_export([1, 2, 3])


class TestLoadHistory:
    def test_reads_file(self, tmp_path, export) -> None:
        path = tmp_path / "export.json"
        path.write_text(json.dumps(export))
        history = load_history(path)
        assert [w.id for w in history.workouts] == ["w1", "w2"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(HistoryFileError, match="not found"):
            load_history(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(HistoryFileError, match="not valid JSON"):
            load_history(path)

    def test_not_utf8(self, tmp_path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"workouts": ["\xff\xfe"]}')
        with pytest.raises(HistoryFileError, match="not valid UTF-8"):
            load_history(path)

    def test_directory(self, tmp_path) -> None:
        with pytest.raises(HistoryFileError, match="Could not read"):
            load_history(tmp_path)

    def test_non_object_record(self, tmp_path) -> None:
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"workouts": ["oops"]}))
        with pytest.raises(MalformedRecordError, match="not an object") as exc_info:
            load_history(path)
        assert exc_info.value.record_kind == "workout"


class TestMalformedCollections:
    @pytest.mark.parametrize("key", ["workouts", "exercises", "sets"])
    def test_collection_must_be_a_list(self, key: str) -> None:
        with pytest.raises(MalformedRecordError, match="must be a list"):
            history_from_export({key: {"id": "x"}})

    def test_null_collection_is_empty(self) -> None:
        assert history_from_export({"sets": None}).sets == ()
