"""
Service registry for cargo-recursive.

Each interface (ILogger, IPresenter) maps to one dependency-injector
provider: an already-built instance, or a factory evaluated on first use
and cached for the rest of the run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Interface-keyed registry of providers for one CLI run."""

    def __init__(self) -> None:
        self._registry: dict[type, providers.Provider] = {}

    def register_instance(self, interface: type[T], instance: T) -> None:
        """Bind interface to an existing object."""
        self._registry[interface] = providers.Object(instance)

    def register_factory(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Bind interface to a factory that runs once, on first resolution."""
        self._registry[interface] = providers.Singleton(factory)

    def lookup(self, interface: type[T]) -> T | None:
        """Return the service bound to interface, or None."""
        provider = self._registry.get(interface)
        return provider() if provider is not None else None

    def resolve(self, interface: type[T]) -> T:
        """
        Return the service bound to interface.

        Raises:
            LookupError: If nothing is bound to interface
        """
        service = self.lookup(interface)
        if service is None:
            raise LookupError(f"{interface.__name__} is not registered")
        return service


_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the process-wide container, creating it on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def drop_container() -> None:
    """Forget the process-wide container and everything bound in it."""
    global _container
    _container = None
