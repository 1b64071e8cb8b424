"""
Test fixtures for workout-text-parser.

Provides a parser instance, a service with small limits, and a FastAPI
test client.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Repo root: .../workout-text-parser
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_text_parser...`
p_str = str(SRC)
if p_str not in sys.path:
    sys.path.insert(0, p_str)

from workout_text_parser.main import app
from workout_text_parser.parsers.workout_parser import WorkoutTextParser
from workout_text_parser.services.parser_service import ParserService


# ---------------------------------------------------------------------------
# Core Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def parser() -> WorkoutTextParser:
    """Fresh parser instance."""
    return WorkoutTextParser()


@pytest.fixture
def service() -> ParserService:
    """Parser service with a small worker pool."""
    return ParserService(max_workers=2)


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_workout_text() -> str:
    """A full session mixing normal sets, a superset and a circuit."""
    return (
        "Bench Press 5x5 185lbs @RPE8, "
        "Squats 3x10 ss Lunges 3x12; "
        "Push-ups 3x10 + Burpees 3x8"
    )
