"""Query showcase: the demo sections run against the record tables.

Each section builds a query over the employee and department tables and
returns its results as a ReportSection of plain items (join rows, groupings,
records or labelled statements). Formatting is left to the console report.

Sections:
    sorting-method   join, order_by department, then_by_descending salary
    sorting-query    join, order_by_descending department, then_by salary
    group-by         deferred grouping of employees by department
    to-lookup        immediate lookup of employees by department
    quantifiers      all / any against a salary threshold, contains by id
    filters          where(is_manager), of_type over a mixed sequence
    elements         element accessors, including their failure modes

Failures of strict accessors are the one place the showcase handles errors:
they are caught, logged, counted and reported as the result of that step.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Sequence

from query_engine.application.query import Query
from query_engine.domain.entities import Department, Employee, EmployeeDepartment
from query_engine.domain.value_objects import EqualityComparer
from query_engine.infrastructure.config import ReportConfig
from query_engine.infrastructure.logging import get_logger
from query_engine.infrastructure.metrics import MetricsRegistry
from query_engine.infrastructure.tracing import record_section_result, trace_section
from query_engine.ports.inbound import QueryError
from query_engine.ports.outbound import RecordSource

logger = get_logger(__name__)


@dataclass(frozen=True)
class Statement:
    """A labelled scalar result. A statement without value is a subheading."""

    label: str
    value: Any = None
    has_value: bool = True

    @classmethod
    def heading(cls, label: str) -> Statement:
        return cls(label, has_value=False)


@dataclass
class ReportSection:
    """Results of one showcase section."""

    name: str
    title: str
    items: list[Any] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class UnknownSectionError(ValueError):
    """Raised when a requested section name does not exist."""

    pass


class QueryShowcase:
    """Runs the showcase sections against a record source."""

    SECTIONS: tuple[tuple[str, str], ...] = (
        ("sorting-method", "Sorting operators - Method syntax"),
        ("sorting-query", "Sorting operators - Query syntax"),
        ("group-by", "Grouping operator GroupBy - Query syntax"),
        ("to-lookup", "Grouping operator ToLookup - Method syntax"),
        ("quantifiers", "Quantifier operators"),
        ("filters", "Filter operators"),
        ("elements", "Element operators"),
    )

    def __init__(
        self,
        source: RecordSource,
        metrics: MetricsRegistry,
        config: ReportConfig | None = None,
    ) -> None:
        self._source = source
        self._metrics = metrics
        self._config = config or ReportConfig()
        self._titles = dict(self.SECTIONS)
        self._builders: dict[str, Callable[[], list[Any]]] = {
            "sorting-method": self._sorting_method,
            "sorting-query": self._sorting_query,
            "group-by": self._group_by,
            "to-lookup": self._to_lookup,
            "quantifiers": self._quantifiers,
            "filters": self._filters,
            "elements": self._elements,
        }

    @classmethod
    def section_names(cls) -> list[str]:
        return [name for name, _ in cls.SECTIONS]

    def run(self, names: Sequence[str] | None = None) -> list[ReportSection]:
        """Run the named sections in the order given, or all of them.

        Raises:
            UnknownSectionError: If a name is not a known section. Nothing
                runs in that case.
        """
        selected = list(names) if names else self.section_names()
        unknown = [name for name in selected if name not in self._builders]
        if unknown:
            raise UnknownSectionError(f"Unknown section(s): {', '.join(unknown)}")
        return [self.run_section(name) for name in selected]

    def run_section(self, name: str) -> ReportSection:
        """Run a single section, tracing and timing it."""
        if name not in self._builders:
            raise UnknownSectionError(f"Unknown section: {name}")

        section = ReportSection(name=name, title=self._titles[name])
        log = logger.bind(section=name)
        log.debug("showcase_section_started")
        start = time.perf_counter()

        with trace_section(name) as span:
            error_kind = None
            try:
                section.items = self._builders[name]()
            except QueryError as e:
                error_kind = type(e).__name__
                section.error = f"{error_kind}: {e}"
                self._record_error(e, step=name)
            record_section_result(span, rows=len(section.items), error_kind=error_kind)

        elapsed = time.perf_counter() - start
        status = "success" if section.success else "error"
        self._metrics.section_latency_seconds.labels(section=name).observe(elapsed)
        self._metrics.sections_total.labels(section=name, status=status).inc()
        log.info(
            "showcase_section_completed",
            status=status,
            items=len(section.items),
            duration_ms=round(elapsed * 1000, 3),
        )
        return section

    # Helpers

    def _employees(self) -> Query[Employee]:
        return Query.from_iterable(self._source.employees())

    def _joined(self) -> Query[EmployeeDepartment]:
        return self._employees().join(
            self._source.departments(),
            lambda emp: emp.department_id,
            lambda dept: dept.id,
            EmployeeDepartment.from_pair,
        )

    def _record_error(self, error: QueryError, step: str) -> None:
        kind = type(error).__name__
        self._metrics.query_errors_total.labels(kind=kind).inc()
        logger.warning("query_error", kind=kind, step=step, error=str(error))

    def _attempt(self, label: str, operation: Callable[[], Any]) -> Statement:
        try:
            return Statement(label, _describe(operation()))
        except QueryError as e:
            self._record_error(e, step=label)
            return Statement(label, f"{type(e).__name__}: {e}")

    # Sections

    def _sorting_method(self) -> list[Any]:
        return (
            self._joined()
            .order_by(lambda row: row.department_id)
            .then_by_descending(lambda row: row.annual_salary)
            .to_list()
        )

    def _sorting_query(self) -> list[Any]:
        return (
            self._joined()
            .order_by_descending(lambda row: row.department_id)
            .then_by(lambda row: row.annual_salary)
            .to_list()
        )

    def _group_by(self) -> list[Any]:
        groups = (
            self._employees()
            .order_by_descending(lambda emp: emp.department_id)
            .group_by(lambda emp: emp.department_id)
        )
        return list(groups)

    def _to_lookup(self) -> list[Any]:
        lookup = (
            self._employees()
            .order_by(lambda emp: emp.department_id)
            .to_lookup(lambda emp: emp.department_id)
        )
        return list(lookup)

    def _quantifiers(self) -> list[Any]:
        employees = self._employees()
        threshold = self._config.salary_threshold
        # Same id as an existing employee, every other field differs.
        candidate = Employee(
            id=3,
            first_name="Unknown",
            last_name="Unknown",
            annual_salary=Decimal("0"),
            is_manager=False,
            department_id=0,
        )
        by_id = EqualityComparer.by_key(lambda emp: emp.id)

        return [
            Statement(
                f"All employees earn more than {threshold}",
                employees.all(lambda emp: emp.annual_salary > threshold),
            ),
            Statement(
                f"Any employee earns more than {threshold}",
                employees.any(lambda emp: emp.annual_salary > threshold),
            ),
            Statement(
                f"Employees contain id {candidate.id} (matched by id)",
                employees.contains(candidate, by_id),
            ),
            Statement(
                f"Employees contain id {candidate.id} (matched by all fields)",
                employees.contains(candidate),
            ),
        ]

    def _filters(self) -> list[Any]:
        employees = self._employees()
        managers = employees.where(lambda emp: emp.is_manager).to_list()

        mixed: list[Any] = [
            *self._source.departments()[:2],
            "Human Resources",
            *self._source.employees()[:2],
            *self._source.departments()[2:],
            42,
        ]
        departments = Query.from_iterable(mixed).of_type(Department).to_list()

        return [
            Statement.heading("Managers (where)"),
            *managers,
            Statement.heading("Departments in a mixed sequence (of_type)"),
            *departments,
        ]

    def _elements(self) -> list[Any]:
        employees = self._employees()
        count = employees.count()

        return [
            self._attempt("element_at(0)", lambda: employees.element_at(0)),
            self._attempt(
                f"element_at_or_default({count})",
                lambda: employees.element_at_or_default(count),
            ),
            self._attempt(f"element_at({count})", lambda: employees.element_at(count)),
            self._attempt("first()", lambda: employees.first()),
            self._attempt(
                "first(department 3)",
                lambda: employees.first(lambda emp: emp.department_id == 3),
            ),
            self._attempt(
                "first_or_default(department 8)",
                lambda: employees.first_or_default(lambda emp: emp.department_id == 8),
            ),
            self._attempt(
                "last(department 1)",
                lambda: employees.last(lambda emp: emp.department_id == 1),
            ),
            self._attempt(
                "last_or_default(department 8)",
                lambda: employees.last_or_default(lambda emp: emp.department_id == 8),
            ),
            self._attempt(
                "single(non-manager earning >= 70000)",
                lambda: employees.single(
                    lambda emp: not emp.is_manager and emp.annual_salary >= 70000
                ),
            ),
            self._attempt(
                "single(earning >= 100000)",
                lambda: employees.single(lambda emp: emp.annual_salary >= 100000),
            ),
            self._attempt(
                "single_or_default(department 4)",
                lambda: employees.single_or_default(lambda emp: emp.department_id == 4),
            ),
            self._attempt(
                "single_or_default(department 8)",
                lambda: employees.single_or_default(lambda emp: emp.department_id == 8),
            ),
            self._attempt(
                "single_or_default(department 1)",
                lambda: employees.single_or_default(lambda emp: emp.department_id == 1),
            ),
        ]


def _describe(value: Any) -> Any:
    if value is None:
        return "(default)"
    if isinstance(value, Employee):
        return f"{value.full_name} (id {value.id})"
    return value
