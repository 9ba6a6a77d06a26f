"""Domain entities.

Exports:
    - Employee: An employee record
    - Department: A department record
    - EmployeeDepartment: Employee joined with its department's long name
"""

from query_engine.domain.entities.department import Department
from query_engine.domain.entities.employee import Employee
from query_engine.domain.entities.employee_department import EmployeeDepartment

__all__ = [
    "Department",
    "Employee",
    "EmployeeDepartment",
]
