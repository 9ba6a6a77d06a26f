"""Unit tests for group_by (deferred), to_lookup (immediate) and Grouping."""

from __future__ import annotations

import pytest

from query_engine.application import Grouping, Lookup, Query
from query_engine.domain.entities import Employee


@pytest.mark.unit
class TestGroupBy:
    """Tests for deferred group_by."""

    def test_groups_in_first_occurrence_order(self) -> None:
        """Groups appear in order of their key's first appearance."""
        groups = Query.from_iterable(["b1", "a1", "b2", "c1", "a2"]).group_by(lambda s: s[0])

        result = [(g.key, list(g)) for g in groups]

        assert result == [("b", ["b1", "b2"]), ("a", ["a1", "a2"]), ("c", ["c1"])]

    def test_ordered_source_orders_groups(self, employees: list[Employee]) -> None:
        """Grouping a descending-ordered query yields descending keys."""
        groups = (
            Query.from_iterable(employees)
            .order_by_descending(lambda e: e.department_id)
            .group_by(lambda e: e.department_id)
        )

        result = list(groups)

        assert [g.key for g in result] == [4, 3, 2, 1]
        assert [e.id for e in result[3]] == [1, 4, 6, 9, 10]

    def test_group_by_is_deferred_and_reevaluated(self) -> None:
        """No partitioning until iteration; each iteration partitions again."""
        calls: list[int] = []

        def source() -> list[int]:
            calls.append(1)
            return [1, 2, 3, 4]

        groups = Query(source).group_by(lambda x: x % 2)

        assert calls == []
        first = list(groups)
        second = list(groups)
        assert len(calls) == 2
        assert first == second

    def test_empty_source(self) -> None:
        assert list(Query.from_iterable([]).group_by(lambda x: x)) == []


@pytest.mark.unit
class TestToLookup:
    """Tests for immediate to_lookup."""

    def test_evaluates_once_at_call_time(self) -> None:
        """The source is read when the lookup is built and never again."""
        calls: list[int] = []

        def source() -> list[int]:
            calls.append(1)
            return [1, 2, 3, 4, 5]

        lookup = Query(source).to_lookup(lambda x: x % 2)

        assert len(calls) == 1
        assert lookup[1] == (1, 3, 5)
        assert lookup[0] == (2, 4)
        assert list(lookup)
        assert len(calls) == 1

    def test_unknown_key_returns_empty(self) -> None:
        lookup = Query.from_iterable([1, 2]).to_lookup(lambda x: x)

        assert lookup[42] == ()
        assert 42 not in lookup
        assert 1 in lookup

    def test_source_changes_do_not_affect_lookup(self) -> None:
        data = [1, 2]
        lookup = Query.from_iterable(data).to_lookup(lambda x: x)

        data.append(3)

        assert len(lookup) == 2
        assert lookup.keys() == [1, 2]

    def test_sample_lookup_by_department(self, employees: list[Employee]) -> None:
        lookup = (
            Query.from_iterable(employees)
            .order_by(lambda e: e.department_id)
            .to_lookup(lambda e: e.department_id)
        )

        assert lookup.keys() == [1, 2, 3, 4]
        assert [e.id for e in lookup[2]] == [2, 3, 12]
        assert [g.key for g in lookup] == [1, 2, 3, 4]


@pytest.mark.unit
class TestGrouping:
    """Tests for the Grouping value."""

    def test_members_and_len(self) -> None:
        group = Grouping("k", [1, 2])

        assert group.key == "k"
        assert group.members == (1, 2)
        assert len(group) == 2
        assert group[1] == 2

    def test_equality(self) -> None:
        assert Grouping(1, [1, 2]) == Grouping(1, (1, 2))
        assert Grouping(1, [1, 2]) != Grouping(1, [2, 1])
        assert hash(Grouping(1, [1])) == hash(Grouping(1, (1,)))

    def test_lookup_from_groupings(self) -> None:
        lookup = Lookup([Grouping("a", [1]), Grouping("b", [2, 3])])

        assert lookup["b"] == (2, 3)
        assert "Lookup" in repr(lookup)
