"""
Workout text parsers.

Public entry points for turning a line of workout shorthand into
structured exercise records.
"""

from workout_text_parser.parsers.models import (
    EmptyInputError,
    Exercise,
    ParseResult,
    WorkoutParseError,
    WorkoutSet,
    WorkoutSetType,
)
from workout_text_parser.parsers.workout_parser import WorkoutTextParser, parse_workout_text

__all__ = [
    "EmptyInputError",
    "Exercise",
    "ParseResult",
    "WorkoutParseError",
    "WorkoutSet",
    "WorkoutSetType",
    "WorkoutTextParser",
    "parse_workout_text",
]
