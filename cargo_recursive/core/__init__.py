"""
Core infrastructure for cargo-recursive.

This module provides:
- ServiceContainer: interface registry backed by dependency-injector
- Application bootstrap for initialization
- Interface definitions for the logger and presenter
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    CargoRecursiveError,
    CommandFailedError,
    ConfigFileError,
    ConfigValidationError,
    DirectoryExecutionError,
    DirectoryReadError,
    EmptyCommandError,
    ExecutionError,
    RecursiveConfigError,
    SpawnError,
    TraversalError,
    format_chain,
)

__all__ = [
    "CargoRecursiveError",
    "CommandFailedError",
    "ConfigFileError",
    "ConfigValidationError",
    "DirectoryExecutionError",
    "DirectoryReadError",
    "EmptyCommandError",
    "ExecutionError",
    "RecursiveConfigError",
    "ServiceContainer",
    "SpawnError",
    "TraversalError",
    "bootstrap",
    "format_chain",
    "get_container",
    "reset",
]
