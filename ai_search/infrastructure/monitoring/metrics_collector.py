#!/usr/bin/env python3
"""
Metrics Collector with Prometheus Integration

This module provides metrics collection for the search dispatch with:
- Request counters by outcome (no_ai, cached, stream, error, disconnected)
- Cache hit/miss counters
- Chunks streamed and SSE events written
- Error counters by type and component
- Active stream gauge

Architectural Decision: prometheus-client for industry-standard metrics
- Compatible with Grafana dashboards
- Efficient storage and aggregation
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Gauge,
    Info,
    generate_latest,
)

from ai_search.core.config.settings import get_settings
from ai_search.core.logging.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Metric Definitions
# ============================================================================

SEARCH_REQUESTS = Counter(
    'ai_search_requests_total',
    'Total number of AI search requests by outcome',
    ['outcome']
)

CACHE_HITS = Counter(
    'ai_search_cache_hits_total',
    'Total answer cache hits'
)

CACHE_MISSES = Counter(
    'ai_search_cache_misses_total',
    'Total answer cache misses'
)

CHUNKS_STREAMED = Counter(
    'ai_search_chunks_streamed_total',
    'Total generated chunks delivered to clients'
)

EVENTS_WRITTEN = Counter(
    'ai_search_sse_events_total',
    'Total SSE events flushed to clients',
    ['event']
)

ERRORS = Counter(
    'ai_search_errors_total',
    'Total errors by type and component',
    ['error_type', 'component']
)

ACTIVE_STREAMS = Gauge(
    'ai_search_active_streams',
    'Number of open SSE search streams'
)

APP_INFO = Info(
    'ai_search_app',
    'Application information'
)


class MetricsCollector:
    """
    Centralized metrics collector.

    STAGE-M: Metrics collection

    Usage:
        metrics = get_metrics_collector()
        metrics.record_request("cached")
        output = metrics.get_prometheus_metrics()
    """

    def __init__(self):
        settings = get_settings()

        APP_INFO.info({
            'version': settings.app.APP_VERSION,
            'environment': settings.app.ENVIRONMENT,
            'app_name': settings.app.APP_NAME
        })

        logger.debug("Metrics collector initialized", stage="M.0")

    def record_request(self, outcome: str) -> None:
        """Record a finished request by dispatch outcome."""
        SEARCH_REQUESTS.labels(outcome=outcome).inc()

    def record_cache_hit(self) -> None:
        CACHE_HITS.inc()

    def record_cache_miss(self) -> None:
        CACHE_MISSES.inc()

    def record_chunk_streamed(self) -> None:
        CHUNKS_STREAMED.inc()

    def record_event_written(self, event: str) -> None:
        EVENTS_WRITTEN.labels(event=event).inc()

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error that was handled instead of propagated."""
        ERRORS.labels(error_type=error_type, component=component).inc()

    def increment_streams(self) -> None:
        ACTIVE_STREAMS.inc()

    def decrement_streams(self) -> None:
        ACTIVE_STREAMS.dec()

    def get_prometheus_metrics(self) -> bytes:
        """
        Get Prometheus metrics output.

        Returns:
            bytes: Prometheus text format metrics
        """
        return generate_latest(REGISTRY)

    def get_content_type(self) -> str:
        """Get Prometheus content type."""
        return CONTENT_TYPE_LATEST


# Global metrics collector
_metrics: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Get global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
