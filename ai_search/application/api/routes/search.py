"""
Search Routes
=============

WHAT IS SSE (Server-Sent Events)?
----------------------------------
SSE pushes a sequence of events from server to client over one HTTP
response. Every answer on this route is an event stream:

    event: message
    data: {"status":"stream","content":"hello is an interesting term. "}

    event: done
    data: 

The browser EventSource API delivers ``message`` events to ``onmessage``
and ``done`` to a named listener, which the client uses to close the stream.

ARCHITECTURE:
-------------
- Route: HTTP handling only (this file)
- Service: filter → cache → generator dispatch (search_service.py)
- Streaming: SSE framing and the transport session (ai_search.streaming)
"""

from fastapi import APIRouter, Query

from ai_search.application.api.dependencies import SearchServiceDep
from ai_search.core.config.constants import SSE_MEDIA_TYPE
from ai_search.core.logging.logger import get_logger, get_thread_id
from ai_search.streaming.response import EventStreamResponse

router = APIRouter(tags=["Search"])
logger = get_logger(__name__)


_SSE_RESPONSES = {
    200: {
        "description": "Event stream of `message` events terminated by a `done` event",
        "content": {SSE_MEDIA_TYPE: {}},
    },
    422: {"description": "Validation error - the q parameter is missing"},
}


@router.get(
    "/ai-search",
    response_class=EventStreamResponse,
    responses=_SSE_RESPONSES,
    summary="AI-enhanced search over Server-Sent Events",
)
async def ai_search(
    service: SearchServiceDep,
    q: str = Query(..., description="Free-text search query"),
) -> EventStreamResponse:
    """
    Answer a search query as an SSE stream.

    The query is classified first. Unsuitable queries get a single ``no_ai``
    message, queries with a cached answer get a single ``cached`` message,
    and everything else is streamed as a series of ``stream`` chunks. Every
    stream ends with a ``done`` event.

    The query text is never logged, only its length.
    """
    logger.info("search_request_received", thread_id=get_thread_id(), query_length=len(q))
    return service.create_response(q)


@router.get("/aisearch", response_class=EventStreamResponse, include_in_schema=False)
async def ai_search_alias(
    service: SearchServiceDep,
    q: str = Query(...),
) -> EventStreamResponse:
    """Unhyphenated path kept for existing clients."""
    return await ai_search(service=service, q=q)
