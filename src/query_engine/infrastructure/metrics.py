"""Prometheus metrics for the query engine showcase."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all showcase metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.sections_total = Counter(
            "query_engine_sections_total",
            "Total number of showcase sections run",
            ["section", "status"],  # status: success, error
            registry=self._registry,
        )

        self.section_latency_seconds = Histogram(
            "query_engine_section_latency_seconds",
            "Showcase section latency in seconds",
            ["section"],
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=self._registry,
        )

        self.query_errors_total = Counter(
            "query_engine_query_errors_total",
            "Query errors raised by strict operators",
            ["kind"],  # ElementNotFoundError, AmbiguousMatchError, ...
            registry=self._registry,
        )

        self.rows_rendered_total = Counter(
            "query_engine_rows_rendered_total",
            "Total report lines rendered",
            registry=self._registry,
        )

        self.info = Info(
            "query_engine",
            "Query engine information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from query_engine import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
