"""
Output presenters for the cargo-recursive CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
