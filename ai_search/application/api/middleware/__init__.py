"""
Middleware Package

- **error_handler**: centralized formatting of unhandled exceptions
- **request_context**: per-request thread ID for log correlation

MIDDLEWARE ORDERING:
--------------------
Middleware added last runs first on the way in:

Request flow:  Client → MW1 → MW2 → Handler
Response flow: Handler → MW2 → MW1 → Client
"""

from .error_handler import ErrorHandlingMiddleware, add_error_handling_middleware
from .request_context import thread_id_middleware

__all__ = [
    "ErrorHandlingMiddleware",
    "add_error_handling_middleware",
    "thread_id_middleware",
]
