"""Application layer for the query engine.

Exports:
    Query engine:
        - Query: Lazily evaluated, restartable sequence with query operators
        - OrderedQuery: Query sorted by prioritized keys, extendable with then_by
        - Grouping: A key and its members
        - Lookup: Immediately evaluated grouping, queryable by key
    Showcase:
        - QueryShowcase: Runs the demo sections against a record source
        - ReportSection: Results of one section
        - Statement: Labelled scalar result
        - UnknownSectionError: Unknown section name
"""

from query_engine.application.grouping import Grouping, Lookup
from query_engine.application.query import OrderedQuery, Query
from query_engine.application.showcase import (
    QueryShowcase,
    ReportSection,
    Statement,
    UnknownSectionError,
)

__all__ = [
    "Query",
    "OrderedQuery",
    "Grouping",
    "Lookup",
    "QueryShowcase",
    "ReportSection",
    "Statement",
    "UnknownSectionError",
]
