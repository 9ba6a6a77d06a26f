"""Command-line entry point for the query showcase.

Usage:
    query-engine-demo                       # run every section
    query-engine-demo --section elements    # run selected sections
    query-engine-demo --list-sections

Exit codes:
    0  success
    2  unknown section name (or invalid arguments)
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from query_engine.adapters.inbound.console_report import ConsoleReport
from query_engine.application import QueryShowcase, UnknownSectionError
from query_engine.infrastructure.config import Config, get_config
from query_engine.infrastructure.container import Container, build_container
from query_engine.infrastructure.logging import get_logger, setup_logging
from query_engine.infrastructure.metrics import MetricsRegistry, setup_metrics
from query_engine.infrastructure.tracing import setup_tracing

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="query-engine-demo",
        description="Run query operator showcases against the sample employee tables.",
    )
    parser.add_argument(
        "--section",
        action="append",
        metavar="NAME",
        help="Section to run; repeat for several (default: all)",
    )
    parser.add_argument(
        "--list-sections",
        action="store_true",
        help="List section names and exit",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        help="Override the configured log format",
    )
    return parser


def _configure_observability(config: Config) -> None:
    obs = config.observability
    if obs.otel_endpoint or obs.console_span_export:
        setup_tracing(
            service_name=obs.otel_service_name,
            otlp_endpoint=obs.otel_endpoint,
            console_export=obs.console_span_export,
        )
    if obs.metrics_enabled:
        setup_metrics(port=obs.metrics_port)


def main(argv: Sequence[str] | None = None, container: Container | None = None) -> int:
    """Run the showcase and print the report to stdout.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        container: Pre-wired container; built from the environment if omitted

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.list_sections:
        for name in QueryShowcase.section_names():
            print(name)
        return EXIT_OK

    if container is None:
        config = get_config()
        setup_logging(
            level=args.log_level or config.observability.log_level,
            log_format=args.log_format or config.observability.log_format,
        )
        _configure_observability(config)
        container = build_container(config)
    else:
        config = container.resolve(Config)

    logger = get_logger(__name__)

    showcase = container.resolve(QueryShowcase)
    requested = args.section or config.report.sections or None
    logger.info("cli_started", sections=requested or "all")

    try:
        sections = showcase.run(requested)
    except UnknownSectionError as e:
        logger.error("unknown_section", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    report = container.resolve(ConsoleReport)
    written = report.write(sections, sys.stdout)
    container.resolve(MetricsRegistry).rows_rendered_total.inc(written)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
