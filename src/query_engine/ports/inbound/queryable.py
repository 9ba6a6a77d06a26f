"""Queryable port: the operator contract of the query engine.

Operators fall into two groups by evaluation timing:

Deferred (return a new query, work happens on iteration, re-run on every
iteration against the source):
    where, of_type, select, join, order_by, group_by

Immediate (work happens at call time):
    to_list, to_lookup, count, all, any, contains, element accessors

Error signaling:
    Strict element accessors raise ElementNotFoundError when nothing
    qualifies. The *_or_default variants return a default instead.
    single() and single_or_default() raise AmbiguousMatchError when more
    than one element qualifies; the default never hides ambiguity.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import (
    Any,
    Callable,
    Hashable,
    Iterable,
    Iterator,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from query_engine.domain.value_objects import EqualityComparer

T = TypeVar("T")


class QueryError(Exception):
    """Base class for query engine errors."""

    pass


class ElementNotFoundError(QueryError, LookupError):
    """Raised when a strict element accessor finds no qualifying element."""

    pass


class ElementOutOfRangeError(ElementNotFoundError, IndexError):
    """Raised when element_at() is given an index outside the sequence."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} is out of range for a sequence of {length} element(s)")
        self.index = index
        self.length = length


class AmbiguousMatchError(QueryError, ValueError):
    """Raised when single() finds more than one qualifying element."""

    pass


@runtime_checkable
class Queryable(Protocol[T]):
    """Contract for a restartable, finite sequence of records.

    Lists every operator the engine offers. Query and OrderedQuery satisfy it
    structurally; ordering and lookup results are typed loosely here because
    their concrete classes live in the application layer.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Evaluate the query and iterate its results."""
        ...

    # Deferred

    @abstractmethod
    def where(self, predicate: Callable[[T], bool]) -> Queryable[T]:
        """Keep elements satisfying predicate (deferred)."""
        ...

    @abstractmethod
    def of_type(self, cls: type | tuple[type, ...]) -> Queryable[Any]:
        """Keep elements that are instances of cls (deferred)."""
        ...

    @abstractmethod
    def select(self, projector: Callable[[T], Any]) -> Queryable[Any]:
        ...

    @abstractmethod
    def join(
        self,
        inner: Iterable[Any],
        outer_key: Callable[[T], Any],
        inner_key: Callable[[Any], Any],
        result: Callable[[T, Any], Any],
    ) -> Queryable[Any]:
        """Inner join on key equality, in outer then inner order (deferred)."""
        ...

    @abstractmethod
    def order_by(self, selector: Callable[[T], Any]) -> Queryable[T]:
        """Stable ascending sort; the result also offers then_by()."""
        ...

    @abstractmethod
    def order_by_descending(self, selector: Callable[[T], Any]) -> Queryable[T]:
        """Stable descending sort; the result also offers then_by()."""
        ...

    @abstractmethod
    def group_by(self, key_selector: Callable[[T], Hashable]) -> Queryable[Any]:
        """Groupings in first-appearance order of their key (deferred)."""
        ...

    # Immediate

    @abstractmethod
    def to_list(self) -> list[T]:
        ...

    @abstractmethod
    def to_lookup(self, key_selector: Callable[[T], Hashable]) -> Any:
        """Partition now; indexing the lookup by an unknown key gives ()."""
        ...

    @abstractmethod
    def count(self, predicate: Callable[[T], bool] | None = None) -> int:
        ...

    @abstractmethod
    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if every element satisfies predicate; True when empty."""
        ...

    @abstractmethod
    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """True if at least one element satisfies predicate; False when empty."""
        ...

    @abstractmethod
    def contains(self, target: T, comparer: EqualityComparer[T] | None = None) -> bool:
        """True if some element equals target under comparer."""
        ...

    @abstractmethod
    def element_at(self, index: int) -> T:
        """Element at a zero-based index. Raises ElementOutOfRangeError."""
        ...

    @abstractmethod
    def element_at_or_default(self, index: int, default: Any = None) -> T | Any:
        ...

    @abstractmethod
    def first(self, predicate: Callable[[T], bool] | None = None) -> T:
        """First qualifying element. Raises ElementNotFoundError."""
        ...

    @abstractmethod
    def first_or_default(
        self, predicate: Callable[[T], bool] | None = None, default: Any = None
    ) -> T | Any:
        ...

    @abstractmethod
    def last(self, predicate: Callable[[T], bool] | None = None) -> T:
        """Last qualifying element. Raises ElementNotFoundError."""
        ...

    @abstractmethod
    def last_or_default(
        self, predicate: Callable[[T], bool] | None = None, default: Any = None
    ) -> T | Any:
        ...

    @abstractmethod
    def single(self, predicate: Callable[[T], bool] | None = None) -> T:
        """The only qualifying element.

        Raises:
            ElementNotFoundError: If nothing qualifies
            AmbiguousMatchError: If more than one element qualifies
        """
        ...

    @abstractmethod
    def single_or_default(
        self, predicate: Callable[[T], bool] | None = None, default: Any = None
    ) -> T | Any:
        """The only qualifying element, or default when nothing qualifies.

        Raises:
            AmbiguousMatchError: If more than one element qualifies
        """
        ...
