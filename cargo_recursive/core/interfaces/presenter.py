"""
Presenter interface for user-facing output.

Keeps what the user sees (dry-run reports, traces, warnings, errors)
apart from diagnostic logging.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations decide how and where messages are displayed.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to standard output."""
        pass

    @abstractmethod
    def print_trace(self, message: str) -> None:
        """Print a diagnostic trace line to standard error."""
        pass

    @abstractmethod
    def print_warning(self, message: str, causes: Sequence[str] = ()) -> None:
        """
        Print a warning, followed by each of its causes on its own line.

        Args:
            message: Warning message
            causes: Underlying causes, outermost first
        """
        pass

    @abstractmethod
    def print_error(self, message: str, causes: Sequence[str] = ()) -> None:
        """
        Print an error, followed by each of its causes on its own line.

        Args:
            message: Error message
            causes: Underlying causes, outermost first
        """
        pass

    @abstractmethod
    def forward_output(self, stdout: bytes, stderr: bytes) -> None:
        """
        Write captured child process output to our own streams verbatim.

        Args:
            stdout: Bytes for standard output
            stderr: Bytes for standard error
        """
        pass
