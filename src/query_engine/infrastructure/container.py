"""Dependency injection container."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from query_engine.infrastructure.config import Config
from query_engine.infrastructure.metrics import MetricsRegistry, get_metrics

T = TypeVar("T")


class Container:
    """
    Simple dependency injection container.

    Supports singleton and factory registrations with lazy initialization.
    """

    def __init__(self) -> None:
        """Initialize the container."""
        self._singletons: dict[type, Any] = {}
        self._factories: dict[type, Callable[[Container], Any]] = {}
        self._instances: dict[type, Any] = {}

    def register_singleton(self, interface: type[T], instance: T) -> None:
        """
        Register a singleton instance.

        Args:
            interface: The interface/type to register
            instance: The singleton instance
        """
        self._singletons[interface] = instance
        self._instances[interface] = instance

    def register_factory(
        self,
        interface: type[T],
        factory: Callable[[Container], T],
    ) -> None:
        """
        Register a factory function for lazy instantiation.

        A factory registered after the interface was resolved replaces the
        cached instance on the next resolve.

        Args:
            interface: The interface/type to register
            factory: Factory function that takes the container and returns an instance
        """
        self._factories[interface] = factory
        self._instances.pop(interface, None)

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a dependency.

        Args:
            interface: The interface/type to resolve

        Returns:
            The resolved instance

        Raises:
            KeyError: If no registration exists for the interface
        """
        if interface in self._instances:
            return self._instances[interface]

        if interface in self._singletons:
            return self._singletons[interface]

        if interface in self._factories:
            instance = self._factories[interface](self)
            self._instances[interface] = instance
            return instance

        raise KeyError(f"No registration found for {interface}")

    def has(self, interface: type) -> bool:
        """Check if an interface is registered."""
        return (
            interface in self._singletons
            or interface in self._factories
            or interface in self._instances
        )

    def clear(self) -> None:
        """Clear all registrations and instances."""
        self._singletons.clear()
        self._factories.clear()
        self._instances.clear()


def build_container(
    config: Config | None = None,
    metrics: MetricsRegistry | None = None,
) -> Container:
    """
    Wire the showcase and its collaborators.

    Args:
        config: Configuration (defaults to a fresh Config from the environment)
        metrics: Metrics registry (defaults to the global one)

    Returns:
        A container resolving Config, RecordSource, MetricsRegistry,
        ConsoleReport and QueryShowcase
    """
    from query_engine.adapters.inbound.console_report import ConsoleReport
    from query_engine.adapters.outbound.sample_data import InMemoryRecordSource
    from query_engine.application.showcase import QueryShowcase
    from query_engine.ports.outbound import RecordSource

    container = Container()
    container.register_singleton(Config, config or Config())
    if metrics is not None:
        container.register_singleton(MetricsRegistry, metrics)
    else:
        container.register_factory(MetricsRegistry, lambda c: get_metrics())
    container.register_factory(RecordSource, lambda c: InMemoryRecordSource())
    container.register_factory(
        ConsoleReport,
        lambda c: ConsoleReport(column_width=c.resolve(Config).report.column_width),
    )
    container.register_factory(
        QueryShowcase,
        lambda c: QueryShowcase(
            source=c.resolve(RecordSource),
            metrics=c.resolve(MetricsRegistry),
            config=c.resolve(Config).report,
        ),
    )
    return container


# Global container instance
_container: Container | None = None


def get_container() -> Container:
    """Get the global container instance, wired on first use."""
    global _container
    if _container is None:
        _container = build_container()
    return _container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    if _container is not None:
        _container.clear()
    _container = None
