"""
Exception Module

Structured exception hierarchy for the AI search service.

Module Structure:
-----------------
- **base.py**: AISearchError base class + ConfigurationError
- **transport.py**: SSE transport state and sink exceptions

Usage:
------
```python
from ai_search.core.exceptions import AlreadyInitializedError, ClientDisconnectedError
```
"""

from ai_search.core.exceptions.base import AISearchError, ConfigurationError
from ai_search.core.exceptions.transport import (
    AlreadyInitializedError,
    ClientDisconnectedError,
    EventFramingError,
    TransportError,
    TransportStateError,
    UninitializedUseError,
)

__all__ = [
    # Base
    "AISearchError",
    "ConfigurationError",
    # Transport
    "TransportError",
    "TransportStateError",
    "AlreadyInitializedError",
    "UninitializedUseError",
    "ClientDisconnectedError",
    "EventFramingError",
]
