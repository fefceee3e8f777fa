"""
Traversal engine.

Walks a directory tree depth-first, runs the command in every directory that
directly contains the manifest marker (before descending into it), and
decides at each recursion call whether a child's failure is reported as a
warning or aborts the whole walk.
"""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.exceptions import (
    CargoRecursiveError,
    DirectoryExecutionError,
    DirectoryReadError,
    format_chain,
)
from ...core.models.traversal import TraversalOptions, TraversalSummary

if TYPE_CHECKING:
    from ...core.interfaces.logger import ILogger
    from ...core.interfaces.presenter import IPresenter
    from ...core.models.command import CommandSpec
    from ..execution.executor import CommandExecutor


class TraversalEngine:
    """
    Depth-bounded, pre-order directory walker.

    Sibling directories are visited in the order the OS lists them, which is
    not guaranteed to be stable.

    Usage:
        engine = TraversalEngine(executor, TraversalOptions(depth=3))
        summary = engine.run(Path("."), spec)
    """

    def __init__(
        self,
        executor: CommandExecutor,
        options: TraversalOptions | None = None,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize traversal engine.

        Args:
            executor: Runs the command in matched directories
            options: Depth, manifest name, dry-run and verbose flags
            presenter: User-facing output (resolved lazily)
            logger: Diagnostic logger (resolved lazily)
        """
        self._executor = executor
        self._options = options or TraversalOptions()
        self._presenter = presenter
        self._logger = logger
        self._summary = TraversalSummary()

    @property
    def presenter(self) -> IPresenter:
        if self._presenter is None:
            from ...core.di import resolve_or_default
            from ...core.interfaces.presenter import IPresenter
            from ...presenters.console import ConsolePresenter

            self._presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
        return self._presenter

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ...core.di import resolve_or_default
            from ...core.interfaces.logger import ILogger
            from ...services.logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def run(self, root: Path, spec: CommandSpec) -> TraversalSummary:
        """
        Walk the tree below root.

        Errors raised for the root itself are never recovered from.

        Args:
            root: Directory the walk starts at
            spec: Command to run in each matched directory

        Returns:
            Summary of matched/executed directories and reported warnings

        Raises:
            CargoRecursiveError: On a fatal failure
        """
        self._summary = TraversalSummary()
        self._check_root(root)
        self.visit(root, self._options.initial_budget, spec)

        if self._options.verbose:
            self.presenter.print_trace(
                f"Matched {len(self._summary.matched)} director"
                f"{'y' if len(self._summary.matched) == 1 else 'ies'}, "
                f"{len(self._summary.warnings)} warning(s)"
            )
        return self._summary

    def visit(self, path: Path, depth_budget: int, spec: CommandSpec) -> None:
        """
        Visit one directory, then its subdirectories with one less budget.

        Args:
            path: Directory to visit
            depth_budget: Remaining levels, 0 means nothing is done
            spec: Command specification, also carrying the exit-on-error policy

        Raises:
            CargoRecursiveError: If this directory failed, or a child failed
                while spec.exit_on_error is set
        """
        if depth_budget == 0:
            return

        self.logger.debug("Entering %s (depth budget %d)", path, depth_budget)

        if self._is_project(path):
            self._process_project(path, spec)

        if depth_budget == 1:
            # Children would be visited with a budget of 0
            return

        for child in self._list_subdirectories(path):
            try:
                self.visit(child, depth_budget - 1, spec)
            except CargoRecursiveError as e:
                if spec.exit_on_error:
                    raise
                self._report_warning(e)

    def _check_root(self, root: Path) -> None:
        """Fail if root is missing or not a directory, whatever the depth."""
        try:
            is_dir = stat.S_ISDIR(root.stat().st_mode)
        except OSError as e:
            raise DirectoryReadError(
                f"reading directory '{_display_path(root)}'", cause=e
            ) from e
        if not is_dir:
            raise DirectoryReadError(
                f"reading directory '{_display_path(root)}'",
                cause=NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(root)),
            )

    def _is_project(self, path: Path) -> bool:
        """Check whether path directly contains the manifest marker."""
        try:
            return (path / self._options.manifest).exists()
        except OSError as e:
            raise DirectoryReadError(
                f"reading directory '{_display_path(path)}'", cause=e
            ) from e

    def _process_project(self, path: Path, spec: CommandSpec) -> None:
        """Run (or in dry-run mode, report) the command for a matched directory."""
        self._summary.matched.append(path)

        if self._options.verbose:
            self.presenter.print_trace(f"Running in '{path}'")

        if self._options.dry_run:
            self.presenter.print(str(path))
            return

        try:
            self._executor.execute(spec, path)
        except CargoRecursiveError as e:
            raise DirectoryExecutionError(
                f"running in directory '{path}'", directory=str(path), cause=e
            ) from e
        self._summary.executed.append(path)

    def _list_subdirectories(self, path: Path) -> list[Path]:
        """
        List the immediate subdirectories of path.

        Symlinks are not followed, so linked directories are never entered.
        The directory handle is closed before any child is visited.

        Raises:
            DirectoryReadError: If path or one of its entries cannot be read
        """
        children: list[Path] = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        children.append(Path(entry.path))
        except OSError as e:
            raise DirectoryReadError(
                f"reading directory '{_display_path(path)}'", cause=e
            ) from e
        return children

    def _report_warning(self, error: CargoRecursiveError) -> None:
        self._summary.warnings.append(error)
        chain = format_chain(error)
        self.logger.warning("%s", " <- ".join(chain))
        self.presenter.print_warning(chain[0], chain[1:])


def _display_path(path: Path) -> str:
    try:
        return str(path.resolve())
    except OSError:
        return str(path)
