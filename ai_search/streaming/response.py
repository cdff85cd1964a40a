"""
Event Stream Response

A Starlette response that hands the raw ASGI connection to a request
handler instead of pulling from a body iterator. The handler receives:

- an ``ASGIEventSink`` to build its SSE transport session on
- an ``asyncio.Event`` that is set when the client disconnects

A background listener drains ``receive()`` while the handler runs, the same
way Starlette's StreamingResponse watches for ``http.disconnect``.
"""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable

from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from ai_search.core.config.constants import SSE_MEDIA_TYPE
from ai_search.core.logging import get_logger
from ai_search.streaming.sink import ASGIEventSink

logger = get_logger(__name__)

EventStreamHandler = Callable[[ASGIEventSink, asyncio.Event], Awaitable[None]]


class EventStreamResponse(Response):
    """
    Response whose body is produced by an SSE handler.

    Headers are not taken from this object: the handler's transport sends
    them when it is initialized.
    """

    media_type = SSE_MEDIA_TYPE

    def __init__(self, handler: EventStreamHandler, status_code: int = 200):
        self.handler = handler
        self.status_code = status_code
        self.background = None
        self.init_headers()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        sink = ASGIEventSink(send, status_code=self.status_code)
        disconnected = asyncio.Event()
        listener = asyncio.create_task(self._listen_for_disconnect(receive, sink, disconnected))

        try:
            await self.handler(sink, disconnected)
        finally:
            listener.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await listener
            await sink.close()

    @staticmethod
    async def _listen_for_disconnect(
        receive: Receive, sink: ASGIEventSink, disconnected: asyncio.Event
    ) -> None:
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                sink.mark_disconnected()
                disconnected.set()
                logger.debug("Client disconnect received")
                return
