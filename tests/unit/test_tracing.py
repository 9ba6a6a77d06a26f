"""Unit tests for showcase section spans."""

from __future__ import annotations

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from query_engine.application import QueryShowcase
from query_engine.infrastructure import tracing
from query_engine.infrastructure.metrics import MetricsRegistry
from query_engine.ports.inbound import ElementNotFoundError
from query_engine.ports.outbound import RecordSource


@pytest.fixture
def exporter(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    """Route spans from the module tracer into memory."""
    memory = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(memory))
    monkeypatch.setattr(tracing, "_tracer", provider.get_tracer("test"))
    return memory


class _FailingSource(RecordSource):
    def employees(self):
        raise ElementNotFoundError("employee table is unavailable")

    def departments(self):
        return []


@pytest.mark.unit
class TestSectionSpans:
    """Section spans carry the section name, row count and outcome."""

    def test_successful_section(
        self,
        exporter: InMemorySpanExporter,
        record_source: RecordSource,
        metrics_registry: MetricsRegistry,
    ) -> None:
        showcase = QueryShowcase(record_source, metrics_registry)

        section = showcase.run_section("sorting-method")

        (span,) = exporter.get_finished_spans()
        assert span.name == "showcase.section"
        assert span.attributes["query.section"] == "sorting-method"
        assert span.attributes["query.rows"] == len(section.items) == 12
        assert span.attributes["query.status"] == "success"
        assert "query.error_kind" not in span.attributes
        assert span.status.status_code != StatusCode.ERROR

    def test_failed_section_records_error_kind(
        self,
        exporter: InMemorySpanExporter,
        metrics_registry: MetricsRegistry,
    ) -> None:
        showcase = QueryShowcase(_FailingSource(), metrics_registry)

        section = showcase.run_section("group-by")

        assert not section.success
        (span,) = exporter.get_finished_spans()
        assert span.attributes["query.section"] == "group-by"
        assert span.attributes["query.rows"] == 0
        assert span.attributes["query.status"] == "error"
        assert span.attributes["query.error_kind"] == "ElementNotFoundError"
        assert span.status.status_code == StatusCode.ERROR

    def test_one_span_per_section(
        self,
        exporter: InMemorySpanExporter,
        record_source: RecordSource,
        metrics_registry: MetricsRegistry,
    ) -> None:
        QueryShowcase(record_source, metrics_registry).run(["filters", "elements"])

        sections = [span.attributes["query.section"] for span in exporter.get_finished_spans()]
        assert sections == ["filters", "elements"]
