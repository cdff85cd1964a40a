"""
Static Answer Cache

In-memory stand-in for a real cache backend. Entries are seeded once at
construction and never change; there is no eviction or TTL. A production
store would add expiration, but must keep the lookup contract: idempotent,
exact match on the normalized query.
"""

from collections.abc import Mapping
from types import MappingProxyType

from ai_search.search.models import CachedAnswer

DEFAULT_ENTRIES: dict[str, CachedAnswer] = {
    "dotnet": CachedAnswer(
        text=".NET is a free, open-source development platform maintained by Microsoft.",
        sources=("https://dotnet.microsoft.com/", "https://docs.microsoft.com"),
    ),
    "sse": CachedAnswer(
        text=(
            "Server-Sent Events (SSE) is a server push technology enabling a client "
            "to receive automatic updates from a server via HTTP connection."
        ),
        sources=("https://developer.mozilla.org/en-US/docs/Web/API/Server-sent_events",),
    ),
}


def normalize_query(query: str) -> str:
    """Cache key for a query: surrounding whitespace trimmed, case folded."""
    return query.strip().casefold()


class StaticAnswerCache:
    """
    Exact-match answer lookup over a fixed table.

    Keys are normalized with ``normalize_query`` on both sides, so
    " DotNet ", "dotnet" and "DOTNET" hit the same entry. No prefix or fuzzy
    matching.
    """

    def __init__(self, entries: Mapping[str, CachedAnswer] | None = None):
        seed = DEFAULT_ENTRIES if entries is None else entries
        self._entries = MappingProxyType(
            {normalize_query(key): answer for key, answer in seed.items()}
        )

    def __len__(self) -> int:
        return len(self._entries)

    async def lookup(self, query: str) -> CachedAnswer | None:
        return self._entries.get(normalize_query(query))
