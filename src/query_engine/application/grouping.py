"""Grouping results: Grouping and Lookup.

A Grouping is one partition of a source sequence: the shared key and the
members that produced it, in source order.

A Lookup is the immediate form of group_by: the partition is computed once,
when the lookup is built, and every later access is a dictionary lookup
with no re-evaluation of the source.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class Grouping(Generic[K, T]):
    """A key and the ordered members that share it."""

    __slots__ = ("_key", "_members")

    def __init__(self, key: K, members: Iterable[T]) -> None:
        self._key = key
        self._members: tuple[T, ...] = tuple(members)

    @property
    def key(self) -> K:
        return self._key

    @property
    def members(self) -> tuple[T, ...]:
        return self._members

    def __iter__(self) -> Iterator[T]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __getitem__(self, index: int) -> T:
        return self._members[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return self._key == other._key and self._members == other._members

    def __hash__(self) -> int:
        return hash((self._key, self._members))

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r}, members={len(self._members)})"


def partition(source: Iterable[T], key_selector: Callable[[T], K]) -> dict[K, list[T]]:
    """Split source into lists keyed by key_selector.

    Dict insertion order gives the order in which each key first appears,
    and each list keeps its members in source order.
    """
    buckets: dict[K, list[T]] = {}
    for item in source:
        buckets.setdefault(key_selector(item), []).append(item)
    return buckets


class Lookup(Generic[K, T]):
    """Immediately evaluated grouping, queryable by key.

    Indexing with a key that has no members returns an empty tuple rather
    than raising, so callers can ask for any key.

    Example:
        >>> lookup = Lookup.build(employees, lambda e: e.department_id)
        >>> [e.id for e in lookup[2]]
        [2, 3, 12]
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Iterable[Grouping[K, T]]) -> None:
        self._groups: dict[K, Grouping[K, T]] = {g.key: g for g in groups}

    @classmethod
    def build(cls, source: Iterable[T], key_selector: Callable[[T], K]) -> Lookup[K, T]:
        """Partition source now and return the resulting lookup."""
        return cls(
            Grouping(key, members)
            for key, members in partition(source, key_selector).items()
        )

    def __getitem__(self, key: K) -> tuple[T, ...]:
        group = self._groups.get(key)
        if group is None:
            return ()
        return group.members

    def __contains__(self, key: Any) -> bool:
        return key in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[Grouping[K, T]]:
        return iter(self._groups.values())

    def keys(self) -> list[K]:
        """Keys in order of first appearance in the source."""
        return list(self._groups)

    def __repr__(self) -> str:
        return f"Lookup(keys={self.keys()!r})"
