"""
Execution result models.

Provides the Pydantic model describing one finished subprocess.
"""

from __future__ import annotations

import subprocess

from pydantic import computed_field

from .base import ImmutableModel


class ExecutionResult(ImmutableModel):
    """Captured output and exit outcome of one command run.

    A process that exited normally has ``exit_code`` set; one terminated by
    a signal has ``signal`` set and no exit code.
    """

    stdout: bytes = b""
    stderr: bytes = b""
    exit_code: int | None = None
    signal: int | None = None

    @classmethod
    def from_completed(cls, completed: subprocess.CompletedProcess) -> ExecutionResult:
        """Build a result from ``subprocess.run`` output.

        On POSIX a negative return code means the child was killed by that
        signal number.
        """
        returncode = completed.returncode
        if returncode < 0:
            exit_code, signal = None, -returncode
        else:
            exit_code, signal = returncode, None
        return cls(
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
            exit_code=exit_code,
            signal=signal,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        """Check if the command succeeded (exit code 0)."""
        return self.exit_code == 0

    def describe(self) -> str:
        """Short description of the exit outcome."""
        if self.exit_code is not None:
            return f"exit code {self.exit_code}"
        if self.signal is not None:
            return f"killed by signal {self.signal}"
        return "terminated abnormally"
