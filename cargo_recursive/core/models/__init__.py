"""
Pydantic models for cargo-recursive.

This package provides typed, validated models for the command
specification, execution results, traversal options and configuration.
"""

from .base import ImmutableModel, RecursiveBaseModel
from .command import CommandSpec, ExternalCommand, Invocation, ToolCommand
from .config import (
    DEFAULT_BINARY,
    DEFAULT_DEPTH,
    DEFAULT_MANIFEST,
    CommandConfig,
    LoggingConfig,
    OutputConfig,
    TraversalConfig,
)
from .execution import ExecutionResult
from .traversal import TraversalOptions, TraversalSummary

__all__ = [
    "DEFAULT_BINARY",
    "DEFAULT_DEPTH",
    "DEFAULT_MANIFEST",
    "CommandConfig",
    "CommandSpec",
    "ExecutionResult",
    "ExternalCommand",
    "ImmutableModel",
    "Invocation",
    "LoggingConfig",
    "OutputConfig",
    "RecursiveBaseModel",
    "ToolCommand",
    "TraversalConfig",
    "TraversalOptions",
    "TraversalSummary",
]
