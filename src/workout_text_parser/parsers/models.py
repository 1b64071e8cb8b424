"""
Parser Models

Pydantic models for the structured output of the workout text parser.
Every model is frozen and holds tuples, not lists: results are built fresh
per call and handed to the caller as-is.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, Field


EMPTY_INPUT_MESSAGE = "Input cannot be empty"
UNKNOWN_ERROR_MESSAGE = "Unknown parsing error"


class WorkoutParseError(Exception):
    """Base error for failures reported through ParseResult"""


class EmptyInputError(WorkoutParseError):
    """Raised when the input is empty after trimming whitespace"""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


class WorkoutSetType(str, Enum):
    """How the exercises in a set relate to each other"""
    NORMAL = "normal"      # Single exercise
    SUPERSET = "superset"  # Chained with "ss"
    CIRCUIT = "circuit"    # Chained with "+"


class Exercise(BaseModel):
    """One movement within a workout set"""
    name: str = Field(..., min_length=1, description="Text preceding the sets x reps token")
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: Optional[str] = Field(default=None, description="Normalized weight, e.g. '185 lbs'")
    rpe: Optional[float] = Field(default=None, description="Rate of perceived exertion")

    class Config:
        frozen = True


class WorkoutSet(BaseModel):
    """A grouping of one or more exercises"""
    exercises: Tuple[Exercise, ...] = Field(..., min_length=1)
    type: WorkoutSetType = WorkoutSetType.NORMAL

    class Config:
        frozen = True
        use_enum_values = True


class ParseResult(BaseModel):
    """Outcome of a single parse call"""
    success: bool
    data: Optional[Tuple[WorkoutSet, ...]] = None
    error: Optional[str] = None

    class Config:
        frozen = True

    @classmethod
    def ok(cls, data: Sequence[WorkoutSet]) -> "ParseResult":
        return cls(success=True, data=tuple(data))

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(success=False, error=error)

    @property
    def exercise_count(self) -> int:
        """Total number of exercises across all sets"""
        if not self.data:
            return 0
        return sum(len(workout_set.exercises) for workout_set in self.data)
