"""Query engine: composable operators over in-memory record sequences.

A Query wraps a factory that produces the source elements. Deferred
operators return a new Query whose factory closes over the parent query and
the transformation; nothing runs until the result is iterated, and every
iteration runs the whole chain again against the source. Immediate
operators consume the query at call time.

    Query (source factory)
        .where / .of_type / .select / .join      -> Query      (deferred)
        .order_by / .order_by_descending         -> OrderedQuery (deferred)
            .then_by / .then_by_descending       -> OrderedQuery
        .group_by                                -> Query[Grouping] (deferred)
        .to_lookup                               -> Lookup     (immediate)
        .all / .any / .contains / .count         -> scalar     (immediate)
        .element_at / .first / .last / .single   -> element    (immediate)

The engine never logs and never retries: failures of strict accessors are
raised to the caller as QueryError subclasses.

Example:
    >>> rows = (
    ...     Query.from_iterable(employees)
    ...     .join(departments, lambda e: e.department_id, lambda d: d.id,
    ...           EmployeeDepartment.from_pair)
    ...     .order_by(lambda r: r.department_id)
    ...     .then_by_descending(lambda r: r.annual_salary)
    ... )
    >>> [r.first_name for r in rows if r.department_id == 1]
    ['Juliana', 'Bob', 'Dominik', 'Jane', 'Martin']
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Sequence, TypeVar

from query_engine.application.grouping import Grouping, Lookup, partition
from query_engine.domain.value_objects import EqualityComparer, SortDirection, SortKey
from query_engine.ports.inbound import (
    AmbiguousMatchError,
    ElementNotFoundError,
    ElementOutOfRangeError,
)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)

_MISSING: Any = object()


class Query(Generic[T]):
    """A restartable, finite, lazily evaluated sequence of elements."""

    def __init__(self, factory: Callable[[], Iterable[T]]) -> None:
        self._factory = factory

    @classmethod
    def from_iterable(cls, source: Iterable[T]) -> Query[T]:
        """Wrap a collection as the root of a query chain.

        One-shot iterators are materialized so the query stays restartable.
        Other collections are read on each evaluation.
        """
        if isinstance(source, Iterator):
            source = tuple(source)
        return cls(lambda: source)

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(deferred)"

    def _narrow(self, predicate: Callable[[T], bool] | None) -> Query[T]:
        if predicate is None:
            return self
        return self.where(predicate)

    # Deferred operators

    def where(self, predicate: Callable[[T], bool]) -> Query[T]:
        """Keep only elements satisfying predicate, in order."""
        return Query(lambda: (item for item in self if predicate(item)))

    def of_type(self, cls: type[U] | tuple[type, ...]) -> Query[U]:
        """Keep only elements that are instances of cls, in order."""
        return Query(lambda: (item for item in self if isinstance(item, cls)))

    def select(self, projector: Callable[[T], R]) -> Query[R]:
        """Map every element through projector."""
        return Query(lambda: (projector(item) for item in self))

    def join(
        self,
        inner: Iterable[U],
        outer_key: Callable[[T], Any],
        inner_key: Callable[[U], Any],
        result: Callable[[T, U], R],
    ) -> Query[R]:
        """Inner join on key equality.

        Emits result(outer, inner) for every pair with equal keys, in outer
        order and then inner order. Outer elements without a match are
        dropped. The inner side is indexed once per evaluation; a one-shot
        iterator is materialized here so the join stays restartable.

        Args:
            inner: Right-hand sequence
            outer_key: Key selector for elements of this query
            inner_key: Key selector for inner elements
            result: Projector applied to each matched pair
        """
        if isinstance(inner, Iterator):
            inner = tuple(inner)

        def evaluate() -> Iterator[R]:
            index = partition(inner, inner_key)
            for outer in self:
                for match in index.get(outer_key(outer), ()):
                    yield result(outer, match)

        return Query(evaluate)

    def order_by(self, selector: Callable[[T], Any]) -> OrderedQuery[T]:
        """Sort ascending by selector."""
        return OrderedQuery(self, (SortKey.ascending(selector),))

    def order_by_descending(self, selector: Callable[[T], Any]) -> OrderedQuery[T]:
        """Sort descending by selector."""
        return OrderedQuery(self, (SortKey.descending(selector),))

    def order_by_keys(self, keys: Sequence[SortKey[T]]) -> OrderedQuery[T]:
        """Sort by several keys given in priority order.

        Raises:
            ValueError: If keys is empty
        """
        if not keys:
            raise ValueError("order_by_keys requires at least one sort key")
        return OrderedQuery(self, tuple(keys))

    def group_by(self, key_selector: Callable[[T], K]) -> Query[Grouping[K, T]]:
        """Partition by key, evaluated each time the result is iterated.

        Groups come out in order of the first appearance of their key and
        keep their members in source order, so grouping an ordered query
        yields groups in that order.
        """
        return Query(
            lambda: (
                Grouping(key, members)
                for key, members in partition(self, key_selector).items()
            )
        )

    # Immediate operators

    def to_list(self) -> list[T]:
        return list(self)

    def to_lookup(self, key_selector: Callable[[T], K]) -> Lookup[K, T]:
        """Partition by key now and return a lookup queryable by key."""
        return Lookup.build(self, key_selector)

    def count(self, predicate: Callable[[T], bool] | None = None) -> int:
        total = 0
        for _ in self._narrow(predicate):
            total += 1
        return total

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if no element fails predicate. Vacuously True when empty."""
        for item in self:
            if not predicate(item):
                return False
        return True

    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """True if at least one element satisfies predicate.

        Without a predicate, True if the sequence has any element.
        """
        for _ in self._narrow(predicate):
            return True
        return False

    def contains(self, target: T, comparer: EqualityComparer[T] | None = None) -> bool:
        """True if some element equals target.

        With a comparer, hashes are compared first and ``comparer.equals``
        only confirms hash matches. The comparer must be consistent: equal
        elements must hash equal, otherwise matches are silently missed.
        """
        if comparer is None:
            for item in self:
                if item == target:
                    return True
            return False

        target_hash = comparer.hash(target)
        for item in self:
            if comparer.hash(item) == target_hash and comparer.equals(item, target):
                return True
        return False

    def element_at(self, index: int) -> T:
        """Element at a zero-based position.

        Raises:
            ElementOutOfRangeError: If index is negative or >= length
        """
        seen = 0
        for item in self:
            if seen == index:
                return item
            seen += 1
        raise ElementOutOfRangeError(index, seen)

    def element_at_or_default(self, index: int, default: Any = None) -> T | Any:
        try:
            return self.element_at(index)
        except ElementOutOfRangeError:
            return default

    def first(self, predicate: Callable[[T], bool] | None = None) -> T:
        """First element, optionally the first satisfying predicate.

        Raises:
            ElementNotFoundError: If no element qualifies
        """
        item = self.first_or_default(predicate, default=_MISSING)
        if item is _MISSING:
            raise ElementNotFoundError(_not_found_message(predicate))
        return item

    def first_or_default(
        self, predicate: Callable[[T], bool] | None = None, default: Any = None
    ) -> T | Any:
        for item in self._narrow(predicate):
            return item
        return default

    def last(self, predicate: Callable[[T], bool] | None = None) -> T:
        """Last element, optionally the last satisfying predicate.

        Raises:
            ElementNotFoundError: If no element qualifies
        """
        item = self.last_or_default(predicate, default=_MISSING)
        if item is _MISSING:
            raise ElementNotFoundError(_not_found_message(predicate))
        return item

    def last_or_default(
        self, predicate: Callable[[T], bool] | None = None, default: Any = None
    ) -> T | Any:
        found = default
        for item in self._narrow(predicate):
            found = item
        return found

    def single(self, predicate: Callable[[T], bool] | None = None) -> T:
        """The one and only qualifying element.

        Raises:
            ElementNotFoundError: If no element qualifies
            AmbiguousMatchError: If more than one element qualifies
        """
        item = self.single_or_default(predicate, default=_MISSING)
        if item is _MISSING:
            raise ElementNotFoundError(_not_found_message(predicate))
        return item

    def single_or_default(
        self, predicate: Callable[[T], bool] | None = None, default: Any = None
    ) -> T | Any:
        """The one qualifying element, or default when none qualifies.

        Raises:
            AmbiguousMatchError: If more than one element qualifies
        """
        found = _MISSING
        for item in self._narrow(predicate):
            if found is not _MISSING:
                if predicate is None:
                    raise AmbiguousMatchError("Sequence contains more than one element")
                raise AmbiguousMatchError("Sequence contains more than one matching element")
            found = item
        if found is _MISSING:
            return default
        return found


class OrderedQuery(Query[T]):
    """A query sorted by one or more keys in priority order.

    Sorting is stable: elements tied on every key keep their source order.
    Each key has its own direction. The sort runs on every iteration.
    """

    def __init__(self, source: Query[T], keys: tuple[SortKey[T], ...]) -> None:
        super().__init__(self._sorted)
        self._source = source
        self._keys = keys

    @property
    def keys(self) -> tuple[SortKey[T], ...]:
        return self._keys

    def _sorted(self) -> list[T]:
        items = list(self._source)
        # Least significant key first; list.sort is stable, with reverse too.
        for key in reversed(self._keys):
            items.sort(key=key.selector, reverse=key.direction.descending)
        return items

    def then_by(self, selector: Callable[[T], Any]) -> OrderedQuery[T]:
        """Break remaining ties ascending by selector."""
        return self._then(SortKey(selector, SortDirection.ASCENDING))

    def then_by_descending(self, selector: Callable[[T], Any]) -> OrderedQuery[T]:
        """Break remaining ties descending by selector."""
        return self._then(SortKey(selector, SortDirection.DESCENDING))

    def _then(self, key: SortKey[T]) -> OrderedQuery[T]:
        return OrderedQuery(self._source, self._keys + (key,))

    def __repr__(self) -> str:
        directions = ", ".join(key.direction.value for key in self._keys)
        return f"OrderedQuery(keys=[{directions}])"


def _not_found_message(predicate: Callable[..., bool] | None) -> str:
    if predicate is None:
        return "Sequence contains no elements"
    return "Sequence contains no matching element"
