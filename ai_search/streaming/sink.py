"""
ASGI Event Sink

Adapts an ASGI ``send`` callable to the ``EventSink`` protocol:

- ``start``  → ``http.response.start`` (status + headers)
- ``write``  → buffered in memory
- ``flush``  → one ``http.response.body`` message with ``more_body=True``
- ``close``  → final empty body with ``more_body=False``

Each ASGI body message is handed to the server immediately, so one flush is
one network write.
"""

from collections.abc import Mapping

import anyio
from starlette.types import Message, Send

from ai_search.core.exceptions import ClientDisconnectedError, TransportStateError
from ai_search.core.logging import get_logger

logger = get_logger(__name__)

# What servers and middleware raise when the peer is gone
_SEND_ERRORS = (OSError, anyio.BrokenResourceError, anyio.ClosedResourceError)


class ASGIEventSink:
    """
    Byte sink over ASGI ``send`` for one HTTP response.

    ``mark_disconnected`` is called by the disconnect listener; from then on
    writes raise ClientDisconnectedError and nothing more is sent.
    """

    def __init__(self, send: Send, status_code: int = 200):
        self._send = send
        self._status_code = status_code
        self._buffer = bytearray()
        self._started = False
        self._closed = False
        self._finished = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def started(self) -> bool:
        return self._started

    def mark_disconnected(self) -> None:
        self._closed = True
        self._buffer.clear()

    async def start(self, headers: Mapping[str, str]) -> None:
        if self._started:
            raise TransportStateError("Response already started")

        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in headers.items()
        ]
        await self._send_message(
            {"type": "http.response.start", "status": self._status_code, "headers": raw_headers}
        )
        self._started = True

    async def write(self, data: bytes) -> None:
        self._ensure_writable()
        self._buffer.extend(data)

    async def flush(self) -> None:
        self._ensure_writable()
        if not self._buffer:
            return

        body = bytes(self._buffer)
        self._buffer.clear()
        await self._send_message({"type": "http.response.body", "body": body, "more_body": True})

    async def close(self) -> None:
        if self._finished:
            return
        self._finished = True

        if self._started and not self._closed:
            try:
                await self._send({"type": "http.response.body", "body": b"", "more_body": False})
            except _SEND_ERRORS as e:
                logger.debug("Final body not sent, client already gone", error=str(e))

        self._closed = True
        self._buffer.clear()

    def _ensure_writable(self) -> None:
        if not self._started:
            raise TransportStateError("Response not started")
        if self._closed:
            raise ClientDisconnectedError("Client connection closed")

    async def _send_message(self, message: Message) -> None:
        try:
            await self._send(message)
        except _SEND_ERRORS as e:
            self.mark_disconnected()
            raise ClientDisconnectedError.from_exception(
                e, message="Client connection closed", message_type=message["type"]
            ) from e
