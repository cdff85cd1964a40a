"""
Search Domain Models

Plain value objects passed between the search collaborators and the
dispatch service. They are frozen: the cache and filter own their data and
handlers only ever read it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterVerdict:
    """
    Outcome of classifying a query.

    Attributes:
        suitable: Whether the query may be sent to the AI backend
        reason: Human-readable rejection reason, only set when not suitable
    """
    suitable: bool
    reason: str | None = None

    @classmethod
    def accept(cls) -> "FilterVerdict":
        return cls(suitable=True)

    @classmethod
    def reject(cls, reason: str) -> "FilterVerdict":
        return cls(suitable=False, reason=reason)


@dataclass(frozen=True)
class CachedAnswer:
    """
    A previously computed answer.

    Attributes:
        text: Answer text
        sources: Source URLs, in display order
    """
    text: str
    sources: tuple[str, ...] = ()
