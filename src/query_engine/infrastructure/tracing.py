"""OpenTelemetry tracing configuration and showcase section spans."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Status, StatusCode


_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "query_engine",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Set up OpenTelemetry tracing.

    Args:
        service_name: Name of the service for tracing
        otlp_endpoint: OTLP collector endpoint (e.g., "http://localhost:4317")
        console_export: Whether to also export to console (for debugging)

    Returns:
        Configured tracer instance
    """
    global _tracer

    from query_engine import __version__

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": __version__,
        }
    )

    provider = TracerProvider(resource=resource)

    if otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    if console_export:
        console_exporter = ConsoleSpanExporter()
        provider.add_span_processor(BatchSpanProcessor(console_exporter))

    trace.set_tracer_provider(provider)

    _tracer = trace.get_tracer(service_name)

    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the global tracer instance."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("query_engine")
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Context manager for creating a trace span.

    Args:
        name: Name of the span
        attributes: Optional attributes to add to the span

    Yields:
        The created span
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(name) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)
        yield span


@contextmanager
def trace_section(section: str) -> Generator[trace.Span, None, None]:
    """
    Span covering one showcase section.

    Args:
        section: Section name, recorded as the ``query.section`` attribute

    Yields:
        The section span, to be completed with record_section_result()
    """
    with trace_span("showcase.section", {"query.section": section}) as span:
        yield span


def record_section_result(
    span: trace.Span,
    rows: int,
    error_kind: str | None = None,
) -> None:
    """
    Record the outcome of a section on its span.

    Args:
        span: The section span
        rows: Number of result items the section produced
        error_kind: Class name of the QueryError that aborted the section, if any
    """
    span.set_attribute("query.rows", rows)
    if error_kind is None:
        span.set_attribute("query.status", "success")
        return
    span.set_attribute("query.status", "error")
    span.set_attribute("query.error_kind", error_kind)
    span.set_status(Status(StatusCode.ERROR, error_kind))
