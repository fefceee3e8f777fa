"""
Custom exception hierarchy for cargo-recursive.

Every failure that can surface while walking a tree or running a command is
raised as a typed exception carrying a human-readable message, optional
debugging context and an explicit cause, so the CLI can print the complete
causal chain.
"""

from __future__ import annotations


class CargoRecursiveError(Exception):
    """
    Base exception for all cargo-recursive errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, binaries, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class RecursiveConfigError(CargoRecursiveError):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(RecursiveConfigError):
    """
    Error reading a configuration file.

    Raised when an explicitly requested config file does not exist or
    cannot be read.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(RecursiveConfigError, ValueError):
    """
    Invalid configuration value, e.g. a depth that is not an integer.

    Inherits from ValueError so callers validating input can catch it
    the usual way.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Traversal Errors
# =============================================================================


class TraversalError(CargoRecursiveError):
    """Base class for filesystem errors raised while walking the tree."""

    pass


class DirectoryReadError(TraversalError):
    """
    A directory could not be listed, or one of its entries could not be
    inspected (permission denied, path vanished, ...).
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class ExecutionError(CargoRecursiveError):
    """Base class for errors raised while running the command."""

    pass


class EmptyCommandError(ExecutionError):
    """The command specification carries no tokens."""

    def __init__(self, message: str = "Argument list empty", **kwargs) -> None:
        super().__init__(message, **kwargs)


class SpawnError(ExecutionError):
    """
    The subprocess could not be launched at all.

    Always fatal for the directory being processed, whatever the
    exit-on-error setting, since the command never ran.
    """

    def __init__(
        self,
        message: str,
        *,
        binary: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if binary:
            ctx["binary"] = binary
        super().__init__(message, context=ctx, cause=cause)


class CommandFailedError(ExecutionError):
    """
    The subprocess ran but did not exit with code 0.

    Only raised when exit-on-error is requested.

    Attributes:
        returncode: Exit code reported by the process, if any
        signal: Signal that terminated the process, if any
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        signal: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.returncode = returncode
        self.signal = signal
        super().__init__(message, cause=cause)


class DirectoryExecutionError(ExecutionError):
    """Wraps an execution failure with the directory it happened in."""

    def __init__(
        self,
        message: str,
        *,
        directory: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.directory = directory
        super().__init__(message, cause=cause)


def format_chain(exc: BaseException) -> list[str]:
    """
    Render an exception and all of its causes, outermost first.

    Follows explicit causes (``raise ... from ...``) and implicit context
    unless it was suppressed.

    Args:
        exc: Exception to render

    Returns:
        One line per exception in the chain
    """
    lines: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        lines.append(str(current) or type(current).__name__)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return lines
