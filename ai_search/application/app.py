#!/usr/bin/env python3
"""
FastAPI Application Entry Point

Configures the AI search application: lifespan, middleware, routers and
exception handlers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_search.application.api.middleware.error_handler import add_error_handling_middleware
from ai_search.application.api.middleware.request_context import thread_id_middleware
from ai_search.application.api.routes.demo import router as demo_router
from ai_search.application.api.routes.health import router as health_router
from ai_search.application.api.routes.search import router as search_router
from ai_search.application.services.search_service import build_search_service
from ai_search.core.config.constants import HEADER_THREAD_ID, Stage
from ai_search.core.config.settings import get_settings
from ai_search.core.exceptions import AISearchError
from ai_search.core.logging.logger import get_logger, setup_logging
from ai_search.infrastructure.monitoring.metrics_collector import get_metrics_collector

logger = get_logger(__name__)


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle (startup and shutdown).
    """
    settings = get_settings()

    setup_logging(log_level=settings.logging.LOG_LEVEL, log_format=settings.logging.LOG_FORMAT)

    logger.info(
        "Starting AI Search Service",
        stage=Stage.INITIALIZATION.value,
        environment=settings.app.ENVIRONMENT,
        version=settings.app.APP_VERSION,
    )

    try:
        get_metrics_collector()

        # Shared by all requests; dependencies.py reads it from app.state
        app.state.search_service = build_search_service(settings)
        logger.info("Search service ready")

        logger.info("Application startup complete")

        yield

    finally:
        logger.info("Shutting down application")
        app.state.search_service = None
        logger.info("Application shutdown complete")


# ============================================================================
# Exception Handlers
# ============================================================================


async def ai_search_exception_handler(request: Request, exc: AISearchError):
    """Handle application exceptions raised before a response has started."""
    logger.error(
        f"AI search exception: {exc.message}", error_type=type(exc).__name__, thread_id=exc.thread_id
    )

    return JSONResponse(
        status_code=500, content=exc.to_dict(), headers={HEADER_THREAD_ID: exc.thread_id or ""}
    )


# ============================================================================
# Application Factory
# ============================================================================


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app.APP_NAME,
        version=settings.app.APP_VERSION,
        description="AI-enhanced search with Server-Sent Events (SSE) responses",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ========================================================================
    # MIDDLEWARE REGISTRATION
    # ========================================================================
    # Last added runs first. The thread ID is set outermost so error logs
    # carry it, and CORS headers are added to error responses too.

    add_error_handling_middleware(
        app, include_traceback=(settings.app.ENVIRONMENT == "development")
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[HEADER_THREAD_ID],
    )

    app.middleware("http")(thread_id_middleware)

    # ========================================================================
    # ROUTER REGISTRATION
    # ========================================================================
    # API routes live under API_BASE_PATH (default: /api), e.g.
    # - GET /api/ai-search?q=...
    # - GET /api/health
    # - GET /api/metrics

    base_path = settings.app.API_BASE_PATH

    app.include_router(search_router, prefix=base_path)
    app.include_router(health_router, prefix=base_path)

    if settings.app.ENABLE_DEMO_PAGE:
        app.include_router(demo_router)

    app.add_exception_handler(AISearchError, ai_search_exception_handler)

    return app


# Create application instance
app = create_app()
