"""Projection of an employee joined with its department."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from query_engine.domain.entities.department import Department
from query_engine.domain.entities.employee import Employee


@dataclass(frozen=True, slots=True)
class EmployeeDepartment:
    """One row of the employee/department join.

    Carries the employee's fields plus the long name of the matched
    department.
    """

    id: int
    first_name: str
    last_name: str
    annual_salary: Decimal
    department_id: int
    department_name: str

    @classmethod
    def from_pair(cls, employee: Employee, department: Department) -> EmployeeDepartment:
        """Build a join row from a matched employee and department."""
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            annual_salary=employee.annual_salary,
            department_id=employee.department_id,
            department_name=department.long_name,
        )
