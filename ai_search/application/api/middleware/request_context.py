"""
Request Context Middleware

Assigns every request a thread ID for log correlation. A client may supply
its own in the ``X-Thread-ID`` header; otherwise a UUID4 is generated. The ID
is echoed back on the response.
"""

import uuid

from fastapi import Request

from ai_search.core.config.constants import HEADER_THREAD_ID
from ai_search.core.logging.logger import clear_thread_id, set_thread_id


async def thread_id_middleware(request: Request, call_next):
    """
    Inject thread ID into all requests for correlation.
    """
    thread_id = request.headers.get(HEADER_THREAD_ID) or str(uuid.uuid4())

    set_thread_id(thread_id)

    try:
        response = await call_next(request)
        response.headers[HEADER_THREAD_ID] = thread_id
        return response

    finally:
        clear_thread_id()
