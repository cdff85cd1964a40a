"""
Test Fixtures Package

Shared test utilities and helpers for consistent testing across all modules.
"""

from .search_factory import (
    FailingAnswerCache,
    FailingGenerator,
    FailingQueryFilter,
    FixedChunkGenerator,
    SearchTestFactory,
)
from .transport_factory import (
    RecordingSink,
    TransportTestFactory,
    message_payloads,
    parse_sse_events,
)

__all__ = [
    "FailingAnswerCache",
    "FailingGenerator",
    "FailingQueryFilter",
    "FixedChunkGenerator",
    "RecordingSink",
    "SearchTestFactory",
    "TransportTestFactory",
    "message_payloads",
    "parse_sse_events",
]
