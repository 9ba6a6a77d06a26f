"""Property tests for the query operators over seeded random inputs."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from query_engine.application import Query
from query_engine.domain.value_objects import EqualityComparer
from query_engine.ports.inbound import (
    AmbiguousMatchError,
    ElementNotFoundError,
    ElementOutOfRangeError,
)

SEEDS = list(range(20))


def _rows(seed: int, size: int | None = None) -> list[tuple[int, int, int]]:
    """Rows of (primary key, secondary key, source position)."""
    rng = random.Random(seed)
    n = rng.randint(0, 30) if size is None else size
    return [(rng.randint(0, 3), rng.randint(0, 3), i) for i in range(n)]


@pytest.mark.property
class TestOrderingProperties:
    """Ordering is a stable permutation."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_permutation_and_stability(self, seed: int) -> None:
        rows = _rows(seed)

        result = (
            Query.from_iterable(rows)
            .order_by(lambda r: r[0])
            .then_by_descending(lambda r: r[1])
            .to_list()
        )

        assert Counter(result) == Counter(rows)
        # Ties on both keys must keep ascending source position.
        assert result == sorted(rows, key=lambda r: (r[0], -r[1], r[2]))


@pytest.mark.property
class TestQuantifierProperties:
    """all / any / contains agree with their definitions."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_all_is_no_failures(self, seed: int) -> None:
        rows = _rows(seed)
        query = Query.from_iterable(rows)

        def predicate(r: tuple[int, int, int]) -> bool:
            return r[0] < 3

        assert query.all(predicate) == (not [r for r in rows if not predicate(r)])
        assert query.any(predicate) == bool([r for r in rows if predicate(r)])

    @pytest.mark.parametrize("seed", SEEDS)
    def test_contains_matches_any_with_comparer(self, seed: int) -> None:
        rng = random.Random(seed)
        values = [rng.randint(0, 50) for _ in range(rng.randint(0, 15))]
        target = rng.randint(0, 50)
        mod_five = EqualityComparer.by_key(lambda x: x % 5)
        query = Query.from_iterable(values)

        assert query.contains(target, mod_five) == query.any(
            lambda x: mod_five.equals(x, target)
        )


@pytest.mark.property
class TestElementProperties:
    """element_at and single agree with plain iteration."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_element_at_matches_iteration(self, seed: int) -> None:
        rows = _rows(seed)
        query = Query.from_iterable(rows)

        for index in range(-2, len(rows) + 2):
            if 0 <= index < len(rows):
                assert query.element_at(index) == rows[index]
                assert query.element_at_or_default(index) == rows[index]
            else:
                with pytest.raises(ElementOutOfRangeError):
                    query.element_at(index)
                assert query.element_at_or_default(index) is None

    @pytest.mark.parametrize("seed", SEEDS)
    def test_single_by_match_count(self, seed: int) -> None:
        rows = _rows(seed)
        query = Query.from_iterable(rows)

        for key in range(4):
            matches = [r for r in rows if r[0] == key]
            if len(matches) == 1:
                assert query.single(lambda r: r[0] == key) == matches[0]
            elif not matches:
                with pytest.raises(ElementNotFoundError):
                    query.single(lambda r: r[0] == key)
                assert query.single_or_default(lambda r: r[0] == key) is None
            else:
                with pytest.raises(AmbiguousMatchError):
                    query.single(lambda r: r[0] == key)
                with pytest.raises(AmbiguousMatchError):
                    query.single_or_default(lambda r: r[0] == key)


@pytest.mark.property
class TestJoinGroupingProperties:
    """Joining does not change grouping membership for matched rows."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_join_then_group_matches_direct_group(self, seed: int) -> None:
        rng = random.Random(seed)
        # (employee id, department id); departments 1..3 exist, 4..5 do not
        outer = [(i, rng.randint(1, 5)) for i in range(rng.randint(0, 25))]
        inner = [(d, f"dept-{d}") for d in (1, 2, 3)]

        joined = Query.from_iterable(outer).join(
            inner, lambda o: o[1], lambda d: d[0], lambda o, d: (o[0], o[1], d[1])
        )
        via_join = {
            g.key: [row[0] for row in g] for g in joined.group_by(lambda row: row[1])
        }
        direct = {
            g.key: [o[0] for o in g]
            for g in Query.from_iterable(outer)
            .where(lambda o: o[1] in {1, 2, 3})
            .group_by(lambda o: o[1])
        }

        assert via_join == direct
