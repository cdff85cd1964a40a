"""
Error Handling Middleware
=========================

WHAT IS CENTRALIZED ERROR HANDLING?
------------------------------------
Middleware catches every exception a route or inner middleware lets escape
and turns it into one consistent JSON error, so no route needs its own
catch-all.

SSE ROUTES:
-----------
Once an event stream has started, its status line and headers are already on
the wire and a JSON error can no longer be sent. The search service reports
those failures in-band as an error event, so the only exceptions that reach
this middleware from a stream are transport misuse bugs. They are logged and
re-raised to the server.
"""

import traceback
from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ai_search.core.logging.logger import get_logger
from ai_search.infrastructure.monitoring.metrics_collector import get_metrics_collector

logger = get_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Last line of defense for unhandled exceptions.

    - All errors are logged with full context
    - Clients get a generic message, never internal details
    - Tracebacks are included only when ``include_traceback`` is set
    """

    def __init__(self, app, include_traceback: bool = False):
        """
        Args:
            app: The ASGI application
            include_traceback: Whether to include stack traces in error responses
                              (should be False in production)
        """
        super().__init__(app)
        self.include_traceback = include_traceback

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            method = request.method
            path = request.url.path
            error_type = type(e).__name__
            error_message = str(e)

            # Path only: the query string carries user search text
            logger.error(
                f"Unhandled exception in request: {method} {path}",
                method=method,
                path=path,
                error_type=error_type,
                error_message=error_message,
                exc_info=True,
            )

            get_metrics_collector().record_error(error_type, "unhandled_exception")

            error_response = {
                "error": "internal_server_error",
                "message": "An unexpected error occurred while processing your request",
                "error_type": error_type,
            }

            if self.include_traceback:
                error_response["traceback"] = traceback.format_exc()
                error_response["detail"] = error_message

            return JSONResponse(status_code=500, content=error_response)


def add_error_handling_middleware(app, include_traceback: bool = False):
    """
    Add error handling middleware to the FastAPI application.

    Register it before other middleware so it wraps them all.

    Args:
        app: FastAPI application instance
        include_traceback: Whether to include stack traces in responses
    """
    app.add_middleware(ErrorHandlingMiddleware, include_traceback=include_traceback)
    logger.info("Error handling middleware registered", include_traceback=include_traceback)
