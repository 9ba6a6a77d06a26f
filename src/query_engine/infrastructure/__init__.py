"""Infrastructure layer - cross-cutting concerns."""

from query_engine.infrastructure.config import Config, get_config
from query_engine.infrastructure.logging import setup_logging, get_logger
from query_engine.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from query_engine.infrastructure.tracing import (
    setup_tracing,
    get_tracer,
    trace_span,
    trace_section,
    record_section_result,
)

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
    "trace_section",
    "record_section_result",
]
