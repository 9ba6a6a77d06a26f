"""Unit tests for value objects and entities."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from query_engine.domain.entities import Department, Employee, EmployeeDepartment
from query_engine.domain.value_objects import EqualityComparer, SortDirection, SortKey


@pytest.mark.unit
class TestSortKey:
    """Tests for SortKey and SortDirection."""

    def test_default_direction_is_ascending(self) -> None:
        key = SortKey(lambda x: x)

        assert key.direction is SortDirection.ASCENDING
        assert not key.direction.descending

    def test_constructors(self) -> None:
        assert SortKey.ascending(len).direction is SortDirection.ASCENDING
        assert SortKey.descending(len).direction.descending

    def test_immutable(self) -> None:
        key = SortKey(len)

        with pytest.raises(dataclasses.FrozenInstanceError):
            key.direction = SortDirection.DESCENDING  # type: ignore[misc]


@pytest.mark.unit
class TestEqualityComparer:
    """Tests for EqualityComparer."""

    def test_default_uses_natural_equality(self) -> None:
        comparer: EqualityComparer[int] = EqualityComparer()

        assert comparer.equals(1, 1)
        assert not comparer.equals(1, 2)
        assert comparer.hash(5) == hash(5)

    def test_by_key_is_consistent(self) -> None:
        """Elements equal by key also hash equal."""
        by_first = EqualityComparer.by_key(lambda t: t[0])

        assert by_first.equals((1, "a"), (1, "b"))
        assert by_first.hash((1, "a")) == by_first.hash((1, "b"))
        assert not by_first.equals((1, "a"), (2, "a"))


@pytest.mark.unit
class TestEntities:
    """Tests for the record types."""

    def test_employee_full_name(self) -> None:
        emp = Employee(1, "Bob", "Jones", Decimal("60000.3"), True, 1)

        assert emp.full_name == "Bob Jones"

    def test_records_are_immutable(self) -> None:
        dept = Department(1, "HR", "Human Resources")

        with pytest.raises(dataclasses.FrozenInstanceError):
            dept.long_name = "Other"  # type: ignore[misc]

    def test_employee_department_from_pair(self) -> None:
        emp = Employee(9, "Juliana", "Szotkova", Decimal("90000.3"), False, 1)
        dept = Department(1, "HR", "Human Resources")

        row = EmployeeDepartment.from_pair(emp, dept)

        assert row.id == 9
        assert row.annual_salary == Decimal("90000.3")
        assert row.department_id == 1
        assert row.department_name == "Human Resources"
