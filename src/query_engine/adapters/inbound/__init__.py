"""Inbound adapters.

Exports:
    - ConsoleReport: Fixed-width text rendering of showcase sections
    - main: Command-line entry point
"""

from query_engine.adapters.inbound.cli import main
from query_engine.adapters.inbound.console_report import ConsoleReport

__all__ = ["ConsoleReport", "main"]
