"""
Console presenter for terminal output.

Implements human-readable output for the CLI.
"""

import sys
from collections.abc import Sequence

import click

from ..core.interfaces.presenter import IPresenter

CAUSE_INDENT = "    "


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Regular messages go to stdout; traces, warnings and errors go to stderr.
    """

    def __init__(self, use_color: bool = True, file=None, err_file=None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes (only on a TTY)
            file: Output file (defaults to sys.stdout)
            err_file: Error output file (defaults to sys.stderr)
        """
        self._file = file or sys.stdout
        self._err_file = err_file or sys.stderr
        self._use_color = use_color and _isatty(self._err_file)

    def print(self, message: str) -> None:
        """Print a message to output."""
        print(message, file=self._file)

    def print_trace(self, message: str) -> None:
        """Print a trace line to stderr."""
        print(message, file=self._err_file)

    def print_warning(self, message: str, causes: Sequence[str] = ()) -> None:
        """Print a warning and its causes to stderr."""
        if self._use_color:
            print(f"\033[93mWarning: {message}\033[0m", file=self._err_file)
        else:
            print(f"Warning: {message}", file=self._err_file)
        self._print_causes(causes)

    def print_error(self, message: str, causes: Sequence[str] = ()) -> None:
        """Print an error message and its causes to stderr."""
        if self._use_color:
            print(f"\033[91mError: {message}\033[0m", file=self._err_file)
        else:
            print(f"Error: {message}", file=self._err_file)
        self._print_causes(causes)

    def forward_output(self, stdout: bytes, stderr: bytes) -> None:
        """Write child output verbatim, stdout first."""
        if stdout:
            click.echo(stdout, file=self._file, nl=False)
        if stderr:
            click.echo(stderr, file=self._err_file, nl=False)

    def _print_causes(self, causes: Sequence[str]) -> None:
        for cause in causes:
            print(f"{CAUSE_INDENT}{cause}", file=self._err_file)


def _isatty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
