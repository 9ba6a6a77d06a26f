"""Pytest configuration and fixtures for query_engine tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from query_engine.adapters.outbound.sample_data import (
    SAMPLE_DEPARTMENTS,
    SAMPLE_EMPLOYEES,
    InMemoryRecordSource,
)
from query_engine.domain.entities import Department, Employee
from query_engine.infrastructure.config import Config
from query_engine.infrastructure.container import Container, build_container, reset_container
from query_engine.infrastructure.logging import setup_logging
from query_engine.infrastructure.metrics import MetricsRegistry


@pytest.fixture(scope="session", autouse=True)
def _structured_logging() -> None:
    """Route structlog output to stderr so stdout holds only report text."""
    setup_logging(level="DEBUG", log_format="console")


@pytest.fixture
def employees() -> list[Employee]:
    """Provide the sample employee table."""
    return list(SAMPLE_EMPLOYEES)


@pytest.fixture
def departments() -> list[Department]:
    """Provide the sample department table."""
    return list(SAMPLE_DEPARTMENTS)


@pytest.fixture
def record_source() -> InMemoryRecordSource:
    """Provide a record source over the sample tables."""
    return InMemoryRecordSource()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def container(metrics_registry: MetricsRegistry) -> Generator[Container, None, None]:
    """Provide a freshly wired DI container for each test."""
    reset_container()
    c = build_container(Config(), metrics=metrics_registry)
    yield c
    c.clear()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "property: Property-based tests")
