"""
Transport Exceptions

All exceptions related to the SSE transport session and its sink.
"""

from ai_search.core.exceptions.base import AISearchError


class TransportError(AISearchError):
    """Base exception for SSE transport errors."""
    pass


class TransportStateError(TransportError):
    """
    Raised when the transport is driven out of order.

    These are programming errors in the request handler wiring. They are
    raised to the caller and never turned into SSE events.
    """
    pass


class AlreadyInitializedError(TransportStateError):
    """Raised when initialize() is called on a session that is not uninitialized."""
    pass


class UninitializedUseError(TransportStateError):
    """Raised when a write is attempted before initialize()."""
    pass


class ClientDisconnectedError(TransportError):
    """
    Raised by a sink when the peer is gone.

    The SSE writer converts this into a soft failure (the write returns
    False) so the handler can stop producing events.
    """
    pass


class EventFramingError(TransportError):
    """Raised when an event name cannot be framed on a single SSE line."""
    pass
