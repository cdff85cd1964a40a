"""
SSE Writer - Transport Session
==============================

One ``SSEWriter`` exists per request. It owns the request's event sink and
is the only place where the SSE wire format is produced, so every dispatch
branch (rejected, cached, streamed, error) shares the same framing and the
same termination rule.

STATE MACHINE:
--------------
    UNINITIALIZED --initialize(sink)--> OPEN --close()--> CLOSED

- initialize() twice          → AlreadyInitializedError
- write before initialize()   → UninitializedUseError
- write when sink is gone     → returns False (soft failure)
- write after the done event  → returns False
- write after close()         → returns False
- close() twice               → no-op

FLUSH SEMANTICS:
----------------
Every event is written and flushed on its own. Nothing is batched: the point
of the transport is that each chunk is visible to the client as soon as it
is produced.
"""

from typing import Any

from ai_search.core.config.constants import (
    SSE_EVENT_DONE,
    SSE_EVENT_MESSAGE,
    SSE_RESPONSE_HEADERS,
    Stage,
    TransportState,
)
from ai_search.core.exceptions import (
    AlreadyInitializedError,
    ClientDisconnectedError,
    UninitializedUseError,
)
from ai_search.core.interfaces.transport import EventSink
from ai_search.core.logging import get_logger, log_stage
from ai_search.infrastructure.monitoring.metrics_collector import get_metrics_collector
from ai_search.streaming.models import ErrorPayload, SSEEvent

logger = get_logger(__name__)


class SSEWriter:
    """
    Frames and flushes SSE events for a single request.

    Not thread-safe and not meant to be shared: the request handler is the
    only writer.

    Usage:
        writer = SSEWriter()
        await writer.initialize(sink)
        try:
            await writer.write_event("message", StreamPayload(content="hi"))
            await writer.write_done()
        finally:
            await writer.close()
    """

    def __init__(self):
        self._state = TransportState.UNINITIALIZED
        self._sink: EventSink | None = None
        self._terminated = False
        self._events_written = 0
        self._metrics = get_metrics_collector()

    @property
    def state(self) -> TransportState:
        return self._state

    @property
    def is_open(self) -> bool:
        """True while events can still reach the client."""
        return (
            self._state is TransportState.OPEN
            and not self._terminated
            and self._sink is not None
            and not self._sink.closed
        )

    @property
    def terminated(self) -> bool:
        """True once the done event has been delivered."""
        return self._terminated

    @property
    def events_written(self) -> int:
        return self._events_written

    async def initialize(self, sink: EventSink) -> None:
        """
        Attach the sink and send the event-stream response metadata.

        Raises:
            AlreadyInitializedError: If the session was already initialized or closed
        """
        if self._state is not TransportState.UNINITIALIZED:
            raise AlreadyInitializedError(
                "SSE writer is already initialized", details={"state": self._state.value}
            )

        await sink.start(SSE_RESPONSE_HEADERS)
        self._sink = sink
        self._state = TransportState.OPEN
        log_stage(logger, Stage.TRANSPORT, "SSE transport opened", level="debug")

    async def write_event(self, event_name: str, payload: Any) -> bool:
        """
        Frame one event, write it and flush.

        Args:
            event_name: SSE event name
            payload: Text written verbatim, or a model/dict encoded as JSON

        Returns:
            True if the event was flushed to the sink, False if the session
            can no longer deliver events (client gone, terminated or closed)

        Raises:
            UninitializedUseError: If called before initialize()
            EventFramingError: If the event name contains a line break
        """
        self._ensure_initialized(event_name)

        if not self.is_open:
            logger.debug(
                "SSE event dropped",
                event_name=event_name,
                state=self._state.value,
                terminated=self._terminated,
            )
            return False

        frame = SSEEvent(event=event_name, data=payload).encode()

        try:
            await self._sink.write(frame)
            await self._sink.flush()
        except ClientDisconnectedError as e:
            log_stage(
                logger,
                Stage.TRANSPORT,
                "Client disconnected during write",
                level="info",
                event_name=event_name,
                reason=e.message,
            )
            return False

        self._events_written += 1
        self._metrics.record_event_written(event_name)

        if event_name == SSE_EVENT_DONE:
            self._terminated = True

        return True

    async def write_done(self) -> bool:
        """Emit the reserved terminal event with an empty payload."""
        return await self.write_event(SSE_EVENT_DONE, "")

    async def write_error(self, message: str) -> bool:
        """
        Emit an error-status message followed by the terminal event.

        Returns:
            True only if both events were delivered
        """
        if not await self.write_event(SSE_EVENT_MESSAGE, ErrorPayload(message=message)):
            return False
        return await self.write_done()

    async def close(self) -> None:
        """Release the sink. Idempotent."""
        if self._state is TransportState.CLOSED:
            return

        sink, self._sink = self._sink, None
        self._state = TransportState.CLOSED

        if sink is not None:
            await sink.close()

        log_stage(
            logger,
            Stage.TRANSPORT,
            "SSE transport closed",
            level="debug",
            events_written=self._events_written,
            terminated=self._terminated,
        )

    def _ensure_initialized(self, event_name: str) -> None:
        if self._state is TransportState.UNINITIALIZED:
            raise UninitializedUseError(
                "SSE writer must be initialized before use",
                details={"event": event_name},
            )
