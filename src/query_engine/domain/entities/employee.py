"""Employee entity."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Employee:
    """An employee record.

    Attributes:
        id: Unique employee identifier
        first_name: Given name
        last_name: Family name
        annual_salary: Yearly salary as a fixed-point decimal
        is_manager: Whether the employee manages other staff
        department_id: Foreign key into the department table. Not enforced:
            an employee whose department does not exist simply drops out
            of joins.
    """

    id: int
    first_name: str
    last_name: str
    annual_salary: Decimal
    is_manager: bool
    department_id: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
