"""Outbound adapters.

Exports:
    - InMemoryRecordSource: The fixed sample employee and department tables
"""

from query_engine.adapters.outbound.sample_data import InMemoryRecordSource

__all__ = ["InMemoryRecordSource"]
