"""
Streaming Module

The SSE transport:

- **models.py**: SSEEvent framing and the message payload models
- **sse_writer.py**: SSEWriter, the per-request transport session
- **sink.py**: ASGIEventSink, the HTTP byte sink
- **response.py**: EventStreamResponse, which runs a handler on the raw connection
"""

from ai_search.streaming.models import (
    CachedPayload,
    ErrorPayload,
    NoAIPayload,
    SSEEvent,
    StreamPayload,
    encode_payload,
)
from ai_search.streaming.response import EventStreamResponse
from ai_search.streaming.sink import ASGIEventSink
from ai_search.streaming.sse_writer import SSEWriter

__all__ = [
    "ASGIEventSink",
    "CachedPayload",
    "ErrorPayload",
    "EventStreamResponse",
    "NoAIPayload",
    "SSEEvent",
    "SSEWriter",
    "StreamPayload",
    "encode_payload",
]
