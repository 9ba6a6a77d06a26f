"""Record source port.

Supplies the employee and department tables the showcase queries. Tables
are read-only snapshots: a source returns a fresh list on each call and
callers never mutate what they receive.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from query_engine.domain.entities import Department, Employee


class RecordSource(ABC):
    """Abstract provider of the employee and department tables."""

    @abstractmethod
    def employees(self) -> list[Employee]:
        """Return all employees in table order."""
        pass

    @abstractmethod
    def departments(self) -> list[Department]:
        """Return all departments in table order."""
        pass
