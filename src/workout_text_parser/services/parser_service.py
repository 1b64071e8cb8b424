"""
Parser service for workout text.

Facade used by the HTTP layer and any other caller. Guards input before
handing it to WorkoutTextParser, offloads parsing to worker threads for
async callers, and fans batches out over a thread pool.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence

from workout_text_parser.config import settings
from workout_text_parser.parsers.models import ParseResult
from workout_text_parser.parsers.workout_parser import WorkoutTextParser

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input text"


class ParserService:
    """Service for parsing free-text workouts"""

    def __init__(
        self,
        parser: Optional[WorkoutTextParser] = None,
        max_workers: Optional[int] = None,
    ):
        self.parser = parser or WorkoutTextParser()
        self.max_workers = max_workers or settings.PARSE_MAX_WORKERS

    def parse(self, text: Any) -> ParseResult:
        """
        Parse one workout string.

        Non-string input is rejected before parsing; everything
        else is delegated to the parser unchanged.
        """
        if not isinstance(text, str):
            logger.warning(f"Rejected non-string workout input of type {type(text).__name__}")
            return ParseResult.failure(INVALID_INPUT_MESSAGE)

        return self.parser.parse(text)

    async def parse_async(self, text: Any) -> ParseResult:
        """Parse in a worker thread so the event loop is never blocked."""
        return await asyncio.to_thread(self.parse, text)

    def parse_batch(self, texts: Sequence[Any]) -> List[ParseResult]:
        """
        Parse many inputs concurrently.

        Results are returned in the same order as the inputs regardless of
        which worker finishes first.
        """
        if not texts:
            return []

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(texts))) as executor:
            results = list(executor.map(self.parse, texts))

        succeeded = sum(1 for r in results if r.success)
        logger.info(f"Parsed batch of {len(results)} workouts ({succeeded} succeeded)")
        return results

    @staticmethod
    def get_debounce_delay(text_length: int) -> int:
        """Milliseconds a live editor should wait before re-parsing text of this length."""
        if text_length < 100:
            return 300
        if text_length < 500:
            return 500
        if text_length < 1000:
            return 750
        return 1000  # Max 1 second for very large texts


parser_service = ParserService()
