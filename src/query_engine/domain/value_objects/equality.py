"""Caller-supplied equality for membership tests.

An EqualityComparer is the pair of functions the engine uses instead of the
elements' own ``==``. This lets callers match records on a subset of their
fields, e.g. employees by identifier only.

Contract:
    Elements the ``equals`` function considers equal MUST produce equal
    ``hash`` values. The engine compares hashes before calling ``equals``
    and does not detect a comparer that breaks this rule; such a comparer
    silently misses matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


def _natural_equals(left: Any, right: Any) -> bool:
    return left == right


@dataclass(frozen=True)
class EqualityComparer(Generic[T]):
    """Equality and hash functions used together as one capability.

    Attributes:
        equals: Returns True when two elements are considered equal
        hash: Hash consistent with ``equals``
    """

    equals: Callable[[T, T], bool] = _natural_equals
    hash: Callable[[T], int] = hash

    @classmethod
    def by_key(cls, selector: Callable[[T], Any]) -> EqualityComparer[T]:
        """Build a comparer that compares elements by a projected key.

        The key must itself be hashable; equality and hash are both derived
        from it, so the contract holds by construction.

        Example:
            >>> by_id = EqualityComparer.by_key(lambda e: e.id)
        """
        return cls(
            equals=lambda left, right: selector(left) == selector(right),
            hash=lambda item: hash(selector(item)),
        )
