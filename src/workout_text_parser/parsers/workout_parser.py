"""
Workout Text Parser

Parses a single line of workout shorthand such as
"Bench Press 5x5 185lbs @RPE8, Squats 3x10 ss Lunges 3x12" into
structured workout sets.

Grammar:
- Segments are separated by "," or ";"
- A segment containing a standalone "ss" is a superset, split on "ss"
- Otherwise a segment containing "+" is a circuit, split on "+"
- Each piece needs "<name> <sets>x<reps>"; weight ("185lbs", "80kg")
  and RPE ("@RPE8") may appear anywhere in the piece

Anything that does not match is dropped rather than reported. The only
reported failure is empty input.
"""

import math
import re
import logging
from typing import List, Optional

from .models import (
    EmptyInputError,
    Exercise,
    ParseResult,
    UNKNOWN_ERROR_MESSAGE,
    WorkoutSet,
    WorkoutSetType,
)

logger = logging.getLogger(__name__)

BOM = "\ufeff"


class WorkoutTextParser:
    """Stateless parser for one line of workout text"""

    # Only ASCII tokens carry meaning, so digits and word boundaries are ASCII-only
    SEGMENT_DELIMITER = re.compile(r'[,;]')
    SETS_REPS_PATTERN = re.compile(r'(\d+)x(\d+)', re.ASCII)  # "5x5", "12x3"
    RPE_PATTERN = re.compile(r'@RPE(\d+(?:\.\d+)?)', re.IGNORECASE | re.ASCII)  # "@RPE8", "@rpe7.5"
    WEIGHT_PATTERN = re.compile(r'(\d+(?:\.\d+)?)(lbs?|kg|pounds?)', re.IGNORECASE | re.ASCII)
    SUPERSET_PATTERN = re.compile(r'\bss\b', re.IGNORECASE | re.ASCII)
    CIRCUIT_PATTERN = re.compile(r'\+')

    @staticmethod
    def trim(text: str) -> str:
        """Strip surrounding whitespace, including byte order marks (U+FEFF)"""
        trimmed = text.strip()
        while trimmed[:1] == BOM or trimmed[-1:] == BOM:
            trimmed = trimmed.strip(BOM).strip()
        return trimmed

    def parse(self, text: str) -> ParseResult:
        """
        Parse workout text into workout sets.

        Args:
            text: Raw user input

        Returns:
            ParseResult with the parsed sets in input order, or an error
            message when the input is empty
        """
        try:
            if not self.trim(text):
                raise EmptyInputError()

            return ParseResult.ok(self.parse_workout_sets(text))

        except EmptyInputError as e:
            return ParseResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error while parsing workout text: {e}")
            return ParseResult.failure(str(e) or UNKNOWN_ERROR_MESSAGE)

    def parse_workout_sets(self, text: str) -> List[WorkoutSet]:
        """Split text into segments and parse each one"""
        segments = [self.trim(s) for s in self.SEGMENT_DELIMITER.split(text)]

        workout_sets = []
        for segment in segments:
            if not segment:
                continue

            workout_set = self.parse_segment(segment)
            if workout_set:
                workout_sets.append(workout_set)
            else:
                logger.debug(f"Dropped segment without exercises: {segment!r}")

        return workout_sets

    def detect_set_type(self, segment: str) -> WorkoutSetType:
        """Superset marker wins over the circuit marker"""
        if self.SUPERSET_PATTERN.search(segment):
            return WorkoutSetType.SUPERSET
        if self.CIRCUIT_PATTERN.search(segment):
            return WorkoutSetType.CIRCUIT
        return WorkoutSetType.NORMAL

    def parse_segment(self, segment: str) -> Optional[WorkoutSet]:
        """Parse one segment into a workout set, or None if nothing matched"""
        set_type = self.detect_set_type(segment)

        if set_type == WorkoutSetType.SUPERSET:
            parts = self.SUPERSET_PATTERN.split(segment)
        elif set_type == WorkoutSetType.CIRCUIT:
            parts = self.CIRCUIT_PATTERN.split(segment)
        else:
            parts = [segment]

        exercises = []
        for part in parts:
            part = self.trim(part)
            if not part:
                continue

            exercise = self.parse_exercise(part)
            if exercise:
                exercises.append(exercise)
            else:
                logger.debug(f"Dropped unparseable exercise: {part!r}")

        if not exercises:
            return None

        return WorkoutSet(exercises=exercises, type=set_type)

    def parse_exercise(self, text: str) -> Optional[Exercise]:
        """Extract a single exercise anchored on its first sets x reps token"""
        sets_reps_match = self.SETS_REPS_PATTERN.search(text)
        if not sets_reps_match:
            return None

        name = self.trim(text[:sets_reps_match.start()])
        if not name:
            return None

        sets = int(sets_reps_match.group(1))
        reps = int(sets_reps_match.group(2))
        if sets < 1 or reps < 1:
            return None

        return Exercise(
            name=name,
            sets=sets,
            reps=reps,
            weight=self.parse_weight(text),
            rpe=self.parse_rpe(text),
        )

    def parse_weight(self, text: str) -> Optional[str]:
        """Return "<number> <unit>" keeping the number text and unit casing"""
        match = self.WEIGHT_PATTERN.search(text)
        if match:
            return f"{match.group(1)} {match.group(2)}"
        return None

    def parse_rpe(self, text: str) -> Optional[float]:
        """Extract RPE value from text"""
        match = self.RPE_PATTERN.search(text)
        if match:
            rpe = float(match.group(1))
            # Digit runs too long for a float overflow to inf
            if math.isfinite(rpe):
                return rpe
        return None


_default_parser = WorkoutTextParser()


def parse_workout_text(text: str) -> ParseResult:
    """Parse workout text with a shared parser instance (it holds no state)."""
    return _default_parser.parse(text)
