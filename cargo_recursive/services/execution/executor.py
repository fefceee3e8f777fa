"""
Command executor.

Runs the configured command inside one project directory, waits for it to
finish, optionally forwards its captured output, and applies the
exit-on-error policy to its exit status.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.exceptions import CommandFailedError, SpawnError
from ...core.models.execution import ExecutionResult

if TYPE_CHECKING:
    from ...core.interfaces.logger import ILogger
    from ...core.interfaces.presenter import IPresenter
    from ...core.models.command import CommandSpec


class CommandExecutor:
    """
    Service for running a command in a directory.

    Handles:
    - Building the argument vector (external binary or default tool)
    - Spawning the process with the target directory as cwd
    - Capturing stdout/stderr in full and forwarding them afterwards
    - Turning a failing exit status into an error when requested

    Usage:
        executor = CommandExecutor(presenter)
        result = executor.execute(spec, Path("crates/core"))
    """

    def __init__(
        self,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize command executor.

        Args:
            presenter: Where forwarded output is written (resolved lazily)
            logger: Diagnostic logger (resolved lazily)
        """
        self._presenter = presenter
        self._logger = logger

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

    def execute(self, spec: CommandSpec, target_dir: Path) -> ExecutionResult:
        """
        Run the command described by spec inside target_dir.

        Args:
            spec: Command specification
            target_dir: Working directory for the child process

        Returns:
            ExecutionResult with captured output and exit outcome

        Raises:
            EmptyCommandError: If the specification carries no tokens
            SpawnError: If the process could not be started
            CommandFailedError: If the command failed and spec.exit_on_error is set
        """
        argv = spec.to_argv()
        self.logger.debug("Spawning '%s' in %s", spec.display(), target_dir)

        try:
            completed = subprocess.run(
                argv,
                cwd=target_dir,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise SpawnError(f"Failed to run '{argv[0]}'", binary=argv[0], cause=e) from e

        result = ExecutionResult.from_completed(completed)
        self.logger.debug("Command in %s finished with %s", target_dir, result.describe())

        if spec.forward_output:
            self.presenter.forward_output(result.stdout, result.stderr)

        if spec.exit_on_error and not result.succeeded:
            if result.exit_code is not None:
                raise CommandFailedError(
                    f"Command returned a nonzero code {result.exit_code}",
                    returncode=result.exit_code,
                )
            raise CommandFailedError(
                f"Command terminated abnormally ({result.describe()})",
                signal=result.signal,
            )

        return result
