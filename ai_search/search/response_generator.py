"""
Simulated Response Generator

A placeholder for AI inference that streams one templated sentence per
query word, then a closing summary, with a random delay before each chunk
to mimic generation latency.
"""

import asyncio
import random
from collections.abc import AsyncGenerator

from ai_search.core.config.settings import GeneratorSettings
from ai_search.core.exceptions import ConfigurationError
from ai_search.core.logging import get_logger

logger = get_logger(__name__)

DelayRange = tuple[float, float]


def word_chunk(word: str) -> str:
    return f"{word} is an interesting term. "


def summary_chunk(query: str) -> str:
    return f"\nYour query was: '{query}'. This is a simulated AI response."


def _validate_range(name: str, delay_range: DelayRange) -> DelayRange:
    low, high = delay_range
    if low < 0 or high < 0 or low > high:
        raise ConfigurationError(
            f"Invalid {name} delay range",
            details={"min": low, "max": high},
        )
    return float(low), float(high)


class SimulatedResponseGenerator:
    """
    Word-by-word fake generation with cooperative cancellation.

    Each call to ``generate`` returns a new async generator; sequences are
    never shared or restarted. Chunk order follows the query's whitespace
    tokenization.

    Cancellation is checked before every chunk and also while waiting out a
    delay: the delay is a timed wait on ``cancel_event``, so a disconnect in
    the middle of a delay ends the sequence right away instead of after the
    delay elapses.
    """

    def __init__(
        self,
        chunk_delay: DelayRange = (0.1, 0.5),
        summary_delay: DelayRange = (0.3, 0.8),
        rng: random.Random | None = None,
    ):
        self._chunk_delay = _validate_range("chunk", chunk_delay)
        self._summary_delay = _validate_range("summary", summary_delay)
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "SimulatedResponseGenerator":
        return cls(
            chunk_delay=(settings.GENERATOR_CHUNK_DELAY_MIN, settings.GENERATOR_CHUNK_DELAY_MAX),
            summary_delay=(
                settings.GENERATOR_SUMMARY_DELAY_MIN,
                settings.GENERATOR_SUMMARY_DELAY_MAX,
            ),
        )

    async def generate(
        self, query: str, cancel_event: asyncio.Event | None = None
    ) -> AsyncGenerator[str, None]:
        words = query.split()
        logger.debug("Generation started", word_count=len(words))

        for word in words:
            if await self._pause(self._chunk_delay, cancel_event):
                logger.debug("Generation cancelled", stage="word")
                return
            yield word_chunk(word)

        if await self._pause(self._summary_delay, cancel_event):
            logger.debug("Generation cancelled", stage="summary")
            return
        yield summary_chunk(query)

    async def _pause(self, delay_range: DelayRange, cancel_event: asyncio.Event | None) -> bool:
        """Wait a random delay. Returns True if cancellation was observed."""
        if cancel_event is not None and cancel_event.is_set():
            return True

        delay = self._rng.uniform(*delay_range)
        if cancel_event is None:
            await asyncio.sleep(delay)
            return False

        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return False
        return True
