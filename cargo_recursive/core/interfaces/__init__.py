"""
Interface definitions for cargo-recursive's services.

These abstract base classes define the contracts implementations follow,
so the engine and executor can be given test doubles.
"""

from .logger import ILogger
from .presenter import IPresenter

__all__ = [
    "ILogger",
    "IPresenter",
]
