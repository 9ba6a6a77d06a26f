"""Configuration management for the query engine showcase."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportConfig(BaseModel):
    """Console report configuration."""

    column_width: int = Field(default=10, ge=1, le=40, description="Padding width of report fields")
    salary_threshold: Decimal = Field(
        default=Decimal("200000"), ge=0, description="Salary threshold used by the quantifier section"
    )
    sections: list[str] = Field(
        default_factory=list, description="Sections to run (empty runs all of them)"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="query_engine", description="Service name for tracing")
    console_span_export: bool = Field(default=False, description="Also print spans to the console")
    metrics_enabled: bool = Field(default=False, description="Expose Prometheus metrics over HTTP")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the query engine showcase."""

    model_config = SettingsConfigDict(
        env_prefix="QUERY_ENGINE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    report: ReportConfig = Field(default_factory=ReportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
