"""
System Constants and Enumerations

This module defines system-wide constants and enumerations used across
the AI search service.

Architectural Decision: Centralized constants for maintainability
- Single source of truth for wire-level names
- Type-safe enums for state management
- Easy to update and track changes
"""

from enum import Enum

# ============================================================================
# Stage Identifiers (for logging)
# ============================================================================


class Stage(str, Enum):
    """
    Request processing stages for structured logging.

    Format: {SEQUENCE}_{DESCRIPTIVE_NAME}

    Each stage represents a step of the search dispatch:
    filter → cache → generation, with every branch ending in termination.
    """

    INITIALIZATION = "0.0_INITIALIZATION"
    QUERY_FILTER = "1.0_QUERY_FILTER"
    CACHE_LOOKUP = "2.0_CACHE_LOOKUP"
    RESPONSE_GENERATION = "3.0_RESPONSE_GENERATION"
    TERMINATION = "4.0_TERMINATION"

    TRANSPORT = "T_SSE_TRANSPORT"


# ============================================================================
# Transport States
# ============================================================================


class TransportState(str, Enum):
    """
    SSE transport session states.

    UNINITIALIZED: No sink attached, writes are programming errors
    OPEN: Response metadata sent, events may be written
    CLOSED: Sink released, writes are soft no-ops
    """

    UNINITIALIZED = "uninitialized"
    OPEN = "open"
    CLOSED = "closed"


# ============================================================================
# Search Outcomes
# ============================================================================


class SearchStatus(str, Enum):
    """
    Value of the ``status`` discriminator in message payloads.
    """

    NO_AI = "no_ai"
    CACHED = "cached"
    STREAM = "stream"
    ERROR = "error"


# Outcome label used in metrics when the client went away mid-request
OUTCOME_DISCONNECTED = "disconnected"

# ============================================================================
# HTTP Headers
# ============================================================================

HEADER_THREAD_ID = "X-Thread-ID"

SSE_MEDIA_TYPE = "text/event-stream"

SSE_RESPONSE_HEADERS: dict[str, str] = {
    "Content-Type": SSE_MEDIA_TYPE,
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    # Tells NGINX not to buffer the stream
    "X-Accel-Buffering": "no",
}

# ============================================================================
# SSE Event Types
# ============================================================================

SSE_EVENT_MESSAGE = "message"
SSE_EVENT_DONE = "done"

# Client-visible text for unexpected failures (internal details stay in logs)
GENERIC_ERROR_MESSAGE = "An error occurred processing your request"
