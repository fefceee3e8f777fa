"""
Application bootstrap for cargo-recursive.

Binds the presenter and the logger described by the loaded settings.
Called once at CLI startup; later calls return the same container.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, drop_container, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter

if TYPE_CHECKING:
    from .settings import RecursiveSettings

_initialized = False


def bootstrap(settings: RecursiveSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the application.

    Args:
        settings: Loaded settings (defaults are used when omitted)

    Returns:
        Container with IPresenter and ILogger bound
    """
    global _initialized

    container = get_container()
    if _initialized:
        return container

    if settings is None:
        from .settings import RecursiveSettings

        settings = RecursiveSettings()

    from ..presenters.console import ConsolePresenter
    from ..services.logging import RecursiveLogger

    container.register_instance(
        IPresenter,  # type: ignore[type-abstract]
        ConsolePresenter(use_color=settings.output.color),
    )
    logging_config = settings.logging
    container.register_factory(
        ILogger,  # type: ignore[type-abstract]
        lambda: RecursiveLogger.from_config(logging_config),
    )

    _initialized = True
    return container


def reset() -> None:
    """Drop every registration; the next bootstrap() starts from scratch."""
    global _initialized
    drop_container()
    _initialized = False
