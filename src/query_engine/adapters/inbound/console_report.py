"""Console report adapter.

Renders showcase sections as text:

    ***** Sorting operators - Method syntax *****
    Id: 9    First Name: Juliana    Last Name: Szotkova   Annual Salary: 90000.3 ...
    ...
    <blank line>

Fields are left-aligned and padded to a fixed column width. The layout is
cosmetic; the engine's results do not depend on it.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, TextIO

from query_engine.application import Grouping, ReportSection, Statement
from query_engine.domain.entities import Department, Employee, EmployeeDepartment


class ConsoleReport:
    """Formats showcase sections into report lines."""

    def __init__(self, column_width: int = 10) -> None:
        if column_width < 1:
            raise ValueError(f"column_width must be positive, got {column_width}")
        self._width = column_width

    @property
    def column_width(self) -> int:
        return self._width

    def render(self, section: ReportSection) -> list[str]:
        """Render one section: header, item lines, blank separator."""
        lines = [f"***** {section.title} *****"]
        for item in section.items:
            lines.extend(self.format_item(item))
        if section.error is not None:
            lines.append(f"Error: {section.error}")
        lines.append("")
        return lines

    def write(self, sections: Iterable[ReportSection], stream: TextIO | None = None) -> int:
        """Write rendered sections to stream (stdout by default).

        Returns:
            Number of lines written
        """
        out = stream or sys.stdout
        written = 0
        for section in sections:
            for line in self.render(section):
                out.write(line + "\n")
                written += 1
        return written

    def format_item(self, item: Any) -> list[str]:
        """Format a single result item into one or more lines."""
        if isinstance(item, EmployeeDepartment):
            return [self.format_join_row(item)]
        elif isinstance(item, Grouping):
            return self.format_grouping(item)
        elif isinstance(item, Employee):
            return [self.format_employee(item)]
        elif isinstance(item, Department):
            return [self.format_department(item)]
        elif isinstance(item, Statement):
            return [self.format_statement(item)]
        return [str(item)]

    def format_join_row(self, row: EmployeeDepartment) -> str:
        w = self._width
        return (
            f"Id: {row.id:<5}"
            f"First Name: {row.first_name:<{w}} "
            f"Last Name: {row.last_name:<{w}} "
            f"Annual Salary: {row.annual_salary:<{w}}"
            f"\tDepartment Id: {row.department_id:<{w}}"
            f"Department Name: {row.department_name:<{w}}"
        )

    def format_grouping(self, group: Grouping[Any, Any]) -> list[str]:
        lines = [f"Department Id: {group.key}"]
        for member in group:
            name = member.full_name if isinstance(member, Employee) else str(member)
            lines.append(f"\t Employee Fullname: {name}")
        return lines

    def format_employee(self, employee: Employee) -> str:
        w = self._width
        return (
            f"Id: {employee.id:<5}"
            f"Full Name: {employee.full_name:<{2 * w}} "
            f"Annual Salary: {employee.annual_salary:<{w}} "
            f"Manager: {employee.is_manager}"
        )

    def format_department(self, department: Department) -> str:
        w = self._width
        return (
            f"Id: {department.id:<5}"
            f"Short Name: {department.short_name:<{w}} "
            f"Long Name: {department.long_name}"
        )

    def format_statement(self, statement: Statement) -> str:
        if not statement.has_value:
            return f"{statement.label}:"
        return f"{statement.label}: {statement.value}"
