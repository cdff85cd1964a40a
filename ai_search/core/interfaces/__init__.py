"""
Core Interfaces Module

Protocols for the pluggable collaborators of the search service.

Components:
-----------
- **search.py**: QueryFilter, AnswerCache, ResponseGenerator
- **transport.py**: EventSink for the SSE transport

Usage:
------
```python
from ai_search.core.interfaces import AnswerCache, QueryFilter

async def dispatch(query_filter: QueryFilter, cache: AnswerCache, query: str):
    verdict = await query_filter.classify(query)
    ...
```
"""

from ai_search.core.interfaces.search import AnswerCache, QueryFilter, ResponseGenerator
from ai_search.core.interfaces.transport import EventSink

__all__ = [
    "AnswerCache",
    "EventSink",
    "QueryFilter",
    "ResponseGenerator",
]
