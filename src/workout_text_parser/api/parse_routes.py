"""
Parse endpoints for workout text

Provides POST /parse/workout for the UI's free-text workout builder.
Returns the parser's ParseResult as-is; fields that were not found are
omitted from the JSON rather than sent as null.
"""

import logging
from typing import List

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from workout_text_parser.config import settings
from workout_text_parser.parsers.models import ParseResult
from workout_text_parser.services.parser_service import parser_service

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_BATCH_SIZE = 100


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class ParseWorkoutRequest(BaseModel):
    """Request model for POST /parse/workout"""
    text: str = Field(..., description="Workout text, e.g. 'Bench Press 5x5 185lbs @RPE8'")


class ParseWorkoutBatchRequest(BaseModel):
    """Request model for POST /parse/workout/batch"""
    texts: List[str] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE)


class ParseWorkoutBatchResponse(BaseModel):
    """Response model for POST /parse/workout/batch"""
    results: List[ParseResult]


class DebounceResponse(BaseModel):
    """Response model for GET /parse/debounce"""
    length: int
    delay_ms: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health")
def health():
    return {"status": "ok", "environment": settings.ENVIRONMENT}


@router.post("/parse/workout", response_model=ParseResult, response_model_exclude_none=True)
async def parse_workout(request: ParseWorkoutRequest) -> ParseResult:
    """
    Parse a line of workout text.

    Parse failures (empty input, oversized input) come back as
    success=false with HTTP 200; only malformed request bodies are 422.
    """
    result = await parser_service.parse_async(request.text)
    if not result.success:
        logger.info(f"Workout text rejected: {result.error}")
    return result


@router.post(
    "/parse/workout/batch",
    response_model=ParseWorkoutBatchResponse,
    response_model_exclude_none=True,
)
def parse_workout_batch(request: ParseWorkoutBatchRequest) -> ParseWorkoutBatchResponse:
    """Parse several workout strings; results keep the request order."""
    return ParseWorkoutBatchResponse(results=parser_service.parse_batch(request.texts))


@router.get("/parse/debounce", response_model=DebounceResponse)
def debounce_delay(length: int = Query(..., ge=0)) -> DebounceResponse:
    """How long a live editor should wait before re-parsing text of this length."""
    return DebounceResponse(length=length, delay_ms=parser_service.get_debounce_delay(length))
