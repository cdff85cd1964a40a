"""
Search Collaborator Protocols

This module defines the narrow capabilities the dispatch service depends on:
classify, lookup and generate. Each has one mock implementation in
``ai_search.search``; production backends (PII model, TTL cache store,
inference client) satisfy the same protocol without touching the transport.

Architectural Decision: Protocol-based abstraction
- Structural subtyping, no inheritance required
- Easy mocking for tests
- Runtime validation with @runtime_checkable
"""

import asyncio
from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from ai_search.search.models import CachedAnswer, FilterVerdict


@runtime_checkable
class QueryFilter(Protocol):
    """Decides whether a query is suitable for AI processing."""

    async def classify(self, query: str) -> FilterVerdict:
        """
        Classify a query.

        Must be total: every input yields a verdict, no exceptions are part
        of the contract.
        """
        ...


@runtime_checkable
class AnswerCache(Protocol):
    """Read-only lookup of previously computed answers."""

    async def lookup(self, query: str) -> CachedAnswer | None:
        """
        Look up an answer by normalized query.

        Idempotent and side-effect free; returns None on a miss.
        """
        ...


@runtime_checkable
class ResponseGenerator(Protocol):
    """Produces incremental answer text for a query."""

    def generate(
        self, query: str, cancel_event: asyncio.Event | None = None
    ) -> AsyncIterator[str]:
        """
        Start a fresh, finite chunk sequence for ``query``.

        The sequence stops early once ``cancel_event`` is set.
        """
        ...
