"""
Dependency injection helpers for cargo-recursive.

Lazy resolution with fallback to default implementations, so services
work both inside a bootstrapped CLI run and when constructed directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def resolve_or_default(
    interface: type[T],
    default_factory: Callable[[], T],
) -> T:
    """Resolve a service from the container or create a default.

    Args:
        interface: The interface type to resolve
        default_factory: Callable that creates the default implementation

    Returns:
        Resolved service instance or default

    Example:
        >>> from cargo_recursive.core.interfaces.logger import ILogger
        >>> from cargo_recursive.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    from .container import get_container

    instance = get_container().lookup(interface)
    if instance is not None:
        return instance
    return default_factory()
