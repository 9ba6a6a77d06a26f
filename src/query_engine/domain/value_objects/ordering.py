"""Sort key value objects for ordered queries.

A multi-key ordering is a tuple of SortKey objects in priority order: the
first key decides, later keys only break ties left by the ones before.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class SortDirection(Enum):
    """Direction of a single sort key."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def descending(self) -> bool:
        return self is SortDirection.DESCENDING


@dataclass(frozen=True)
class SortKey(Generic[T]):
    """A key selector paired with its direction.

    Attributes:
        selector: Extracts the comparable key from an element. Keys must
            support ``<`` against each other (numbers, Decimal, str, tuples).
        direction: Ascending or descending

    Example:
        >>> key = SortKey(lambda e: e.annual_salary, SortDirection.DESCENDING)
        >>> key.direction.descending
        True
    """

    selector: Callable[[T], Any]
    direction: SortDirection = SortDirection.ASCENDING

    @classmethod
    def ascending(cls, selector: Callable[[T], Any]) -> SortKey[T]:
        return cls(selector, SortDirection.ASCENDING)

    @classmethod
    def descending(cls, selector: Callable[[T], Any]) -> SortKey[T]:
        return cls(selector, SortDirection.DESCENDING)
