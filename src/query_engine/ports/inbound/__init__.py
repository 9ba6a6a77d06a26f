"""Inbound ports - the query operator contract.

Exports:
    - Queryable: Protocol implemented by the engine's query objects
    - QueryError: Base class of every error the engine raises
    - ElementNotFoundError: No qualifying element for a strict accessor
    - ElementOutOfRangeError: Index outside the sequence
    - AmbiguousMatchError: More than one qualifying element for single()
"""

from query_engine.ports.inbound.queryable import (
    AmbiguousMatchError,
    ElementNotFoundError,
    ElementOutOfRangeError,
    Queryable,
    QueryError,
)

__all__ = [
    "Queryable",
    "QueryError",
    "ElementNotFoundError",
    "ElementOutOfRangeError",
    "AmbiguousMatchError",
]
