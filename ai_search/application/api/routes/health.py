"""
Health and Metrics Routes
=========================

- ``GET /health``: liveness check for load balancers. It has no
  dependencies to check, so it answers as long as the process is serving.
- ``GET /metrics``: Prometheus exposition format, scraped by Prometheus.

Metrics format:
    # HELP metric_name Description of the metric
    # TYPE metric_name counter
    metric_name{label="value"} 123.45
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Response
from pydantic import BaseModel

from ai_search.application.api.dependencies import SettingsDep
from ai_search.infrastructure.monitoring.metrics_collector import get_metrics_collector

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Standard health check response model."""

    status: str
    version: str
    environment: str
    timestamp: str  # ISO 8601


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Quick health check endpoint for load balancers.

    Returns:
        HealthResponse: Basic health status with timestamp
    """
    return HealthResponse(
        status="healthy",
        version=settings.app.APP_VERSION,
        environment=settings.app.ENVIRONMENT,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )


@router.get("/metrics", include_in_schema=False)
async def prometheus_metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns:
        Response: Metrics in Prometheus text format
    """
    metrics = get_metrics_collector()
    return Response(content=metrics.get_prometheus_metrics(), media_type=metrics.get_content_type())
