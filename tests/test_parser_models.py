"""Unit tests for parser models."""
import pytest
from pydantic import ValidationError

from workout_text_parser.parsers.models import (
    EmptyInputError,
    Exercise,
    ParseResult,
    WorkoutParseError,
    WorkoutSet,
    WorkoutSetType,
)


class TestModels:
    """Test cases for parser models."""

    def test_exercise_creation(self):
        exercise = Exercise(name="Bench Press", sets=5, reps=5, weight="185 lbs", rpe=8.0)

        assert exercise.name == "Bench Press"
        assert exercise.weight == "185 lbs"
        assert exercise.rpe == 8.0

    def test_exercise_optional_fields_default_to_none(self):
        exercise = Exercise(name="Squats", sets=3, reps=10)
        assert exercise.weight is None
        assert exercise.rpe is None

    @pytest.mark.parametrize("fields", [
        {"name": "", "sets": 3, "reps": 10},
        {"name": "Squats", "sets": 0, "reps": 10},
        {"name": "Squats", "sets": 3, "reps": 0},
    ])
    def test_exercise_invariants(self, fields):
        with pytest.raises(ValidationError):
            Exercise(**fields)

    def test_workout_set_requires_exercises(self):
        with pytest.raises(ValidationError):
            WorkoutSet(exercises=[], type=WorkoutSetType.NORMAL)

    def test_workout_set_type_serializes_as_string(self):
        workout_set = WorkoutSet(
            exercises=[Exercise(name="Dips", sets=3, reps=10)],
            type=WorkoutSetType.CIRCUIT,
        )
        assert workout_set.model_dump()["type"] == "circuit"

    def test_parse_result_constructors(self):
        ok = ParseResult.ok([])
        failed = ParseResult.failure("Input cannot be empty")

        assert ok.success is True and ok.data == () and ok.error is None
        assert failed.success is False and failed.data is None
        assert failed.error == "Input cannot be empty"

    def test_exclude_none_matches_wire_contract(self):
        result = ParseResult.ok([
            WorkoutSet(exercises=[Exercise(name="Rows", sets=4, reps=8)], type="normal")
        ])
        dumped = result.model_dump(exclude_none=True)

        assert "error" not in dumped
        assert dumped["data"][0]["exercises"][0] == {"name": "Rows", "sets": 4, "reps": 8}

    def test_exercise_count(self):
        assert ParseResult.failure("x").exercise_count == 0

    def test_empty_input_error(self):
        error = EmptyInputError()
        assert isinstance(error, WorkoutParseError)
        assert str(error) == "Input cannot be empty"
