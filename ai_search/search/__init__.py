"""
Search Collaborators

Mock implementations of the three pluggable capabilities used per request:

- **query_filter.py**: KeywordQueryFilter (GUID heuristic + sensitive-term denylist)
- **answer_cache.py**: StaticAnswerCache (seeded, exact normalized match)
- **response_generator.py**: SimulatedResponseGenerator (delayed word chunks)
"""

from ai_search.search.answer_cache import StaticAnswerCache, normalize_query
from ai_search.search.models import CachedAnswer, FilterVerdict
from ai_search.search.query_filter import KeywordQueryFilter, is_uuid_token
from ai_search.search.response_generator import SimulatedResponseGenerator

__all__ = [
    "CachedAnswer",
    "FilterVerdict",
    "KeywordQueryFilter",
    "SimulatedResponseGenerator",
    "StaticAnswerCache",
    "is_uuid_token",
    "normalize_query",
]
