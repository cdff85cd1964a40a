"""
FastAPI Dependency Injection Module
===================================

Reusable dependencies for the application singletons that are built during
startup and stored on ``app.state``.

Example:
    @router.get("/ai-search")
    async def ai_search(q: str, service: SearchServiceDep):
        return service.create_response(q)

Tests replace a provider with ``app.dependency_overrides[get_search_service]``.
"""

from typing import Annotated

from fastapi import Depends, Request

from ai_search.application.services.search_service import SearchService, build_search_service
from ai_search.core.config.settings import Settings, get_settings
from ai_search.core.logging.logger import get_logger

logger = get_logger(__name__)


def get_search_service(request: Request) -> SearchService:
    """
    Retrieve the SearchService singleton from application state.

    The service is created once in the lifespan handler. When lifespan
    events have not run (for example a TestClient used without a ``with``
    block), a default service is built and cached on ``app.state``.

    Args:
        request: FastAPI Request object

    Returns:
        SearchService: The shared search service
    """
    service = getattr(request.app.state, "search_service", None)
    if service is not None:
        return service

    logger.warning("Search service missing from app.state, building default instance")
    service = build_search_service()
    request.app.state.search_service = service
    return service


# ============================================================================
# TYPE ALIASES FOR DEPENDENCY INJECTION
# ============================================================================

SearchServiceDep = Annotated[SearchService, Depends(get_search_service)]

SettingsDep = Annotated[Settings, Depends(get_settings)]
