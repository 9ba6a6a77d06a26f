"""In-memory sample tables.

Twelve employees across four departments. The data is built once at import
time and handed out as fresh lists, so callers cannot disturb each other.
"""

from __future__ import annotations

from decimal import Decimal

from query_engine.domain.entities import Department, Employee
from query_engine.ports.outbound import RecordSource

# (id, first_name, last_name, annual_salary, is_manager, department_id)
_EMPLOYEE_ROWS = [
    (1, "Bob", "Jones", "60000.3", True, 1),
    (2, "Sarah", "Jameson", "80000.1", True, 2),
    (3, "Douglas", "Roberts", "40000.2", False, 2),
    (4, "Jane", "Stevens", "30000.2", False, 1),
    (5, "David", "Szotek", "75000.3", True, 3),
    (6, "Dominik", "Foniok", "60000.1", False, 1),
    (7, "Klara", "Mezes", "80000.3", True, 3),
    (8, "Rostislav", "Mezes", "35000.3", False, 4),
    (9, "Juliana", "Szotkova", "90000.3", False, 1),
    (10, "Martin", "Cerny", "28000.3", True, 1),
    (11, "Lucie", "Zajac", "88000.3", True, 3),
    (12, "Marek", "Zelina", "21000.3", False, 2),
]

_DEPARTMENT_ROWS = [
    (1, "HR", "Human Resources"),
    (2, "FN", "Finance"),
    (3, "TE", "Technology"),
    (4, "SC", "Security"),
]

SAMPLE_EMPLOYEES: tuple[Employee, ...] = tuple(
    Employee(
        id=emp_id,
        first_name=first,
        last_name=last,
        annual_salary=Decimal(salary),
        is_manager=manager,
        department_id=dept_id,
    )
    for emp_id, first, last, salary, manager, dept_id in _EMPLOYEE_ROWS
)

SAMPLE_DEPARTMENTS: tuple[Department, ...] = tuple(
    Department(id=dept_id, short_name=short, long_name=long)
    for dept_id, short, long in _DEPARTMENT_ROWS
)


class InMemoryRecordSource(RecordSource):
    """Record source backed by fixed in-memory tables.

    Defaults to the sample tables; tests pass their own.
    """

    def __init__(
        self,
        employees: tuple[Employee, ...] | list[Employee] = SAMPLE_EMPLOYEES,
        departments: tuple[Department, ...] | list[Department] = SAMPLE_DEPARTMENTS,
    ) -> None:
        self._employees = tuple(employees)
        self._departments = tuple(departments)

    def employees(self) -> list[Employee]:
        return list(self._employees)

    def departments(self) -> list[Department]:
        return list(self._departments)
