"""
SSE Event and Payload Models

Every branch of the search dispatch funnels through ``SSEEvent``. Payloads
are flat JSON objects whose first field is the ``status`` discriminator:

    event: message
    data: {"status":"stream","content":"hello is an interesting term. "}

    event: done
    data: <empty>

The done event carries an empty payload, so its data line is exactly
``"data: "`` with nothing after the space.
"""

from dataclasses import asdict, is_dataclass
from typing import Any, Literal

import orjson
from pydantic import BaseModel, Field

from ai_search.core.config.constants import SearchStatus
from ai_search.core.exceptions import EventFramingError


class NoAIPayload(BaseModel):
    """Query rejected by the filter."""

    status: Literal[SearchStatus.NO_AI] = SearchStatus.NO_AI
    message: str


class CachedPayload(BaseModel):
    """Answer served from the cache."""

    status: Literal[SearchStatus.CACHED] = SearchStatus.CACHED
    ai_response: str
    sources: list[str] = Field(default_factory=list)


class StreamPayload(BaseModel):
    """One generated chunk."""

    status: Literal[SearchStatus.STREAM] = SearchStatus.STREAM
    content: str


class ErrorPayload(BaseModel):
    """Best-effort notice of an internal failure."""

    status: Literal[SearchStatus.ERROR] = SearchStatus.ERROR
    message: str


def encode_payload(payload: Any) -> str:
    """
    Encode a payload as the text carried by ``data:`` lines.

    Strings pass through untouched. Pydantic models, dataclasses, dicts and
    lists become compact single-line JSON.
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    elif is_dataclass(payload) and not isinstance(payload, type):
        payload = asdict(payload)
    return orjson.dumps(payload).decode("utf-8")


class SSEEvent(BaseModel):
    """
    Represents an SSE event to send to the client.
    """

    event: str
    data: Any = ""

    def format(self) -> str:
        """
        Format as SSE protocol string.

        Multi-line text becomes one ``data:`` line per line; clients rejoin
        them with newlines. An empty payload still gets a single ``data: ``.

        Raises:
            EventFramingError: If the event name contains a line break
        """
        if "\n" in self.event or "\r" in self.event:
            raise EventFramingError(
                "Event name must fit on one line", details={"event": self.event}
            )

        lines = [f"event: {self.event}"]

        text = encode_payload(self.data).replace("\r\n", "\n").replace("\r", "\n")
        for line in text.split("\n"):
            lines.append(f"data: {line}")

        return "\n".join(lines) + "\n\n"

    def encode(self) -> bytes:
        return self.format().encode("utf-8")
