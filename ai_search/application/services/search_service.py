"""
Search Service - Dispatch Orchestration
=======================================

WHAT IS THIS SERVICE?
---------------------
SearchService decides, per query, which of three answers the client gets and
drives the SSE transport to deliver it:

    filter ──unsuitable──▶ message{no_ai}    ─┐
       │                                      │
       ▼ suitable                             │
    cache ───hit────────▶ message{cached}   ──┼──▶ done
       │                                      │
       ▼ miss                                 │
    generator ──────────▶ message{stream} xN ─┘

Every branch ends in the same ``done`` event, so the client needs a single
teardown path.

ERROR HANDLING:
---------------
- Rejection is a normal outcome, not an error.
- Transport misuse (AlreadyInitializedError, UninitializedUseError) is a
  wiring bug and propagates to the caller.
- Client disconnect ends the request quietly: no more chunks are requested
  and no done event is written. A client gone before the response starts
  ends the request the same way.
- Any other failure becomes one best-effort error event followed by done.
  If that write fails too, the failure is logged and dropped.

RESOURCE MANAGEMENT:
--------------------
The transport session is created per request and always closed in a
``finally`` block, even when the client disconnects mid-stream.
"""

import asyncio

from ai_search.core.config.constants import (
    GENERIC_ERROR_MESSAGE,
    OUTCOME_DISCONNECTED,
    SSE_EVENT_MESSAGE,
    SearchStatus,
    Stage,
)
from ai_search.core.config.settings import Settings, get_settings
from ai_search.core.exceptions import ClientDisconnectedError, TransportStateError
from ai_search.core.interfaces import AnswerCache, EventSink, QueryFilter, ResponseGenerator
from ai_search.core.logging import get_logger, get_thread_id, log_stage
from ai_search.infrastructure.monitoring.metrics_collector import get_metrics_collector
from ai_search.search import KeywordQueryFilter, SimulatedResponseGenerator, StaticAnswerCache
from ai_search.streaming.models import CachedPayload, NoAIPayload, StreamPayload
from ai_search.streaming.response import EventStreamResponse
from ai_search.streaming.sse_writer import SSEWriter

logger = get_logger(__name__)


class SearchService:
    """
    Three-way dispatch of a search query over SSE.

    DESIGN PRINCIPLES:
    ------------------
    - Stateless: the filter, cache and generator are read-only collaborators
      shared by all requests; per-request state lives in the SSEWriter
    - Dependency injection: collaborators are passed in, not created here
    - Sequential: filter, then cache, then chunk iteration, never concurrent

    USAGE:
    ------
    service = SearchService(query_filter, answer_cache, response_generator)
    return service.create_response(query)
    """

    def __init__(
        self,
        query_filter: QueryFilter,
        answer_cache: AnswerCache,
        response_generator: ResponseGenerator,
    ):
        self.query_filter = query_filter
        self.answer_cache = answer_cache
        self.response_generator = response_generator
        self._metrics = get_metrics_collector()

    def create_response(self, query: str) -> EventStreamResponse:
        """Build the HTTP response that runs ``handle`` for this query."""

        async def run(sink: EventSink, disconnected: asyncio.Event) -> None:
            await self.handle(query, sink, disconnected)

        return EventStreamResponse(run)

    async def handle(
        self, query: str, sink: EventSink, disconnected: asyncio.Event | None = None
    ) -> str:
        """
        Answer one query on ``sink``.

        Args:
            query: Raw, untrusted query text
            sink: Byte sink for this request only
            disconnected: Set when the client goes away

        Returns:
            The outcome label recorded for this request

        Raises:
            TransportStateError: If the transport is driven out of order
        """
        if disconnected is None:
            disconnected = asyncio.Event()
        log = logger.bind(thread_id=get_thread_id(), query_length=len(query))

        writer = SSEWriter()
        try:
            await writer.initialize(sink)
        except ClientDisconnectedError as e:
            await writer.close()
            self._metrics.record_request(OUTCOME_DISCONNECTED)
            log_stage(
                log,
                Stage.TERMINATION,
                "Client disconnected before the stream started",
                outcome=OUTCOME_DISCONNECTED,
                reason=e.message,
            )
            return OUTCOME_DISCONNECTED

        self._metrics.increment_streams()
        outcome = SearchStatus.ERROR.value

        try:
            outcome = await self._dispatch(query, writer, disconnected, log)

        except TransportStateError:
            raise

        except Exception as e:
            log.error(
                "Search request failed",
                stage=Stage.TERMINATION.value,
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            outcome = SearchStatus.ERROR.value
            self._metrics.record_error(type(e).__name__, "search_service")
            await self._write_error_best_effort(writer, log)

        finally:
            await writer.close()
            self._metrics.decrement_streams()
            self._metrics.record_request(outcome)
            log_stage(
                log,
                Stage.TERMINATION,
                "Search request finished",
                outcome=outcome,
                events_written=writer.events_written,
            )

        return outcome

    async def _dispatch(self, query, writer: SSEWriter, disconnected: asyncio.Event, log) -> str:
        # STEP 1: filter
        verdict = await self.query_filter.classify(query)
        if not verdict.suitable:
            log_stage(log, Stage.QUERY_FILTER, "Query not suitable for AI", reason=verdict.reason)
            await writer.write_event(SSE_EVENT_MESSAGE, NoAIPayload(message=verdict.reason or ""))
            await writer.write_done()
            return SearchStatus.NO_AI.value

        # STEP 2: cache
        cached = await self.answer_cache.lookup(query)
        if cached is not None:
            self._metrics.record_cache_hit()
            log_stage(log, Stage.CACHE_LOOKUP, "Found cached response", sources=len(cached.sources))
            await writer.write_event(
                SSE_EVENT_MESSAGE,
                CachedPayload(ai_response=cached.text, sources=list(cached.sources)),
            )
            await writer.write_done()
            return SearchStatus.CACHED.value

        self._metrics.record_cache_miss()

        # STEP 3: stream
        log_stage(log, Stage.RESPONSE_GENERATION, "Streaming AI response")
        chunk_count = 0
        chunks = self.response_generator.generate(query, disconnected)
        try:
            async for chunk in chunks:
                if disconnected.is_set():
                    break
                if not await writer.write_event(SSE_EVENT_MESSAGE, StreamPayload(content=chunk)):
                    break
                chunk_count += 1
                self._metrics.record_chunk_streamed()
        finally:
            # Stop the generator now rather than at garbage collection
            aclose = getattr(chunks, "aclose", None)
            if aclose is not None:
                await aclose()

        if disconnected.is_set() or not writer.is_open:
            log_stage(
                log,
                Stage.RESPONSE_GENERATION,
                "Client disconnected or request canceled",
                chunks=chunk_count,
            )
            return OUTCOME_DISCONNECTED

        await writer.write_done()
        log_stage(log, Stage.RESPONSE_GENERATION, "Stream completed", chunks=chunk_count)
        return SearchStatus.STREAM.value

    async def _write_error_best_effort(self, writer: SSEWriter, log) -> None:
        try:
            delivered = await writer.write_error(GENERIC_ERROR_MESSAGE)
        except Exception as e:
            log.warning("Error event not delivered", error_type=type(e).__name__, error=str(e))
            return

        if not delivered:
            log.debug("Error event dropped, transport no longer open")


# ============================================================================
# FACTORY
# ============================================================================
# SearchService is stateless, so the app builds one in its lifespan and shares
# it across requests via app.state.


def build_search_service(settings: Settings | None = None) -> SearchService:
    """
    Build a SearchService wired to the default mock collaborators.

    Args:
        settings: Source of the generator delay ranges (defaults to global settings)

    Returns:
        SearchService instance
    """
    settings = settings or get_settings()

    service = SearchService(
        query_filter=KeywordQueryFilter(),
        answer_cache=StaticAnswerCache(),
        response_generator=SimulatedResponseGenerator.from_settings(settings.generator),
    )
    logger.info(
        "Search service created",
        stage=Stage.INITIALIZATION.value,
        chunk_delay_max=settings.generator.GENERATOR_CHUNK_DELAY_MAX,
        summary_delay_max=settings.generator.GENERATOR_SUMMARY_DELAY_MAX,
    )
    return service
