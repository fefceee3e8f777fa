"""
Execution services.

Spawning the configured command in a project directory and evaluating its
exit status.
"""

from .executor import CommandExecutor

__all__ = ["CommandExecutor"]
