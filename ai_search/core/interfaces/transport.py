"""
Event Sink Protocol

The byte sink an SSE transport session writes into. The HTTP implementation
adapts ASGI ``send``; tests use in-memory recording sinks.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class EventSink(Protocol):
    """
    Writable, flushable byte sink for one response.

    Contract:
    - ``start`` sends response metadata and is called once, before any write
    - ``write`` may buffer; ``flush`` delivers everything buffered so far
    - once the peer is gone ``closed`` is True and ``write``/``flush`` raise
      ClientDisconnectedError
    - ``close`` is idempotent
    """

    @property
    def closed(self) -> bool:
        ...

    async def start(self, headers: Mapping[str, str]) -> None:
        ...

    async def write(self, data: bytes) -> None:
        ...

    async def flush(self) -> None:
        ...

    async def close(self) -> None:
        ...
