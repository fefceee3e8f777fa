"""
Diagnostic logging for cargo-recursive.

Child process output is forwarded on the same stderr the log would use,
so nothing is emitted unless the [logging] section switches a sink on.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig

LOGGER_NAME = "cargo_recursive"
DEFAULT_LOG_FILE = Path.home() / ".cargo-recursive" / "cargo-recursive.log"

_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
_ROTATE_BYTES = 1024 * 1024
_ROTATE_KEEP = 3


class RecursiveLogger(ILogger):
    """
    ILogger backed by a stdlib logger whose handlers are owned by this object.

    Usage:
        logger = RecursiveLogger.from_config(settings.logging)
        logger.debug("Spawning %s", argv)
    """

    def __init__(self, handlers: list[logging.Handler], name: str = LOGGER_NAME) -> None:
        self._logger = logging.getLogger(name)
        for old in list(self._logger.handlers):
            self._logger.removeHandler(old)
            old.close()
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for handler in handlers or [logging.NullHandler()]:
            self._logger.addHandler(handler)

    @classmethod
    def from_config(
        cls,
        config: LoggingConfig,
        name: str = LOGGER_NAME,
        log_file: Path | None = None,
    ) -> RecursiveLogger:
        """Create a logger with the sinks enabled in config."""
        level = logging.getLevelName(config.level.upper())
        formatter = logging.Formatter(_FORMAT)
        handlers: list[logging.Handler] = []

        if config.console:
            handlers.append(logging.StreamHandler(sys.stderr))
        if config.file:
            path = log_file or DEFAULT_LOG_FILE
            path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                RotatingFileHandler(path, maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_KEEP)
            )

        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
        return cls(handlers, name=name)

    def log(self, level: int, message: str, *args: Any) -> None:
        self._logger.log(level, message, *args)


class NullLogger(ILogger):
    """Discards everything; the fallback when no logger is registered."""

    def log(self, level: int, message: str, *args: Any) -> None:
        pass
