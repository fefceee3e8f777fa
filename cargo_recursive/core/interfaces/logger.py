"""
Diagnostic logger interface.

Diagnostics (spawned argv, config discovery, skipped warnings) are kept
apart from what the user sees; IPresenter handles the latter.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Interface for diagnostic logging.

    Implementations provide log(); the level helpers delegate to it.
    """

    @abstractmethod
    def log(self, level: int, message: str, *args: Any) -> None:
        """Record message (%-formatted with args) at a stdlib logging level."""

    def debug(self, message: str, *args: Any) -> None:
        self.log(logging.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.log(logging.INFO, message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self.log(logging.WARNING, message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.log(logging.ERROR, message, *args)
