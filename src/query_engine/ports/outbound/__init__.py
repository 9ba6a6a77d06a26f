"""Outbound ports - where record tables come from."""

from query_engine.ports.outbound.record_source import RecordSource

__all__ = ["RecordSource"]
