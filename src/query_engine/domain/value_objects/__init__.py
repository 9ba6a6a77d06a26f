"""Value objects for the query engine domain.

Value objects are immutable and have no identity.

Exports:
    Ordering:
        - SortDirection: Ascending or descending
        - SortKey: Key selector plus direction
    Equality:
        - EqualityComparer: Caller-supplied equals/hash pair
"""

from query_engine.domain.value_objects.equality import EqualityComparer
from query_engine.domain.value_objects.ordering import SortDirection, SortKey

__all__ = [
    # Ordering
    "SortDirection",
    "SortKey",
    # Equality
    "EqualityComparer",
]
