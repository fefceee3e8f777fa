"""
Execution context for the cargo-recursive CLI.

Provides RecursiveContext, which gathers everything one invocation needs:
the traversal root, the loaded settings, and the services registered in
the container.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.exceptions import ConfigValidationError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.settings import RecursiveSettings, load_settings


@dataclass
class RecursiveContext:
    """Context for one CLI invocation.

    Attributes:
        root: Directory the traversal starts at
        settings: Loaded configuration
        presenter: User-facing output
        logger: Diagnostic logger
    """

    root: Path
    settings: RecursiveSettings
    presenter: IPresenter
    logger: ILogger

    @classmethod
    def create(
        cls,
        path: Path | None = None,
        config_path: Path | None = None,
    ) -> RecursiveContext:
        """Create a RecursiveContext for the current environment.

        Loads settings (searching upwards from the traversal root unless
        an explicit config file is given) and bootstraps the container.

        Args:
            path: Traversal root override (defaults to Path.cwd())
            config_path: Explicit config file

        Returns:
            Configured RecursiveContext instance

        Raises:
            RecursiveConfigError: If the configuration cannot be loaded
        """
        root = path if path is not None else Path.cwd()
        settings = load_settings(config_path=config_path, start_dir=str(root))

        container = bootstrap(settings)
        logger: ILogger = container.resolve(ILogger)  # type: ignore[type-abstract]
        presenter: IPresenter = container.resolve(IPresenter)  # type: ignore[type-abstract]

        if settings.config_file:
            logger.debug("Loaded configuration from %s", settings.config_file)
        if settings.config_error:
            logger.warning("%s", settings.config_error)

        return cls(root=root, settings=settings, presenter=presenter, logger=logger)

    def resolve_depth(self, raw: str | None) -> int:
        """Resolve the depth from the CLI value or the configuration.

        Raises:
            ConfigValidationError: If raw is not a non-negative integer
        """
        if raw is None:
            return self.settings.traversal.depth
        return parse_depth(raw)


def parse_depth(raw: str) -> int:
    """Parse a --depth value.

    Raises:
        ConfigValidationError: If raw is not a non-negative integer
    """
    try:
        depth = int(raw)
    except ValueError as e:
        raise ConfigValidationError("depth must be an integer", cause=e) from e
    if depth < 0:
        raise ConfigValidationError("depth must not be negative", key="depth", value=raw)
    return depth
