"""Ports layer - interfaces between the query engine and its callers.

Inbound ports define the operator contract callers program against.
Outbound ports define where the showcase reads its tables from.
"""

from query_engine.ports.inbound import (
    AmbiguousMatchError,
    ElementNotFoundError,
    ElementOutOfRangeError,
    Queryable,
    QueryError,
)
from query_engine.ports.outbound import RecordSource

__all__ = [
    # Inbound
    "Queryable",
    "QueryError",
    "ElementNotFoundError",
    "ElementOutOfRangeError",
    "AmbiguousMatchError",
    # Outbound
    "RecordSource",
]
