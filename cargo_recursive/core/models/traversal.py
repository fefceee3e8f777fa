"""
Traversal models.

Provides the immutable options for a tree walk and the summary it produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

from pydantic import Field

from ..exceptions import CargoRecursiveError
from .base import ImmutableModel
from .config import DEFAULT_DEPTH, DEFAULT_MANIFEST


class TraversalOptions(ImmutableModel):
    """Options shared by every step of one traversal.

    Attributes:
        depth: Number of levels below the root that are visited
        manifest: Marker file name that makes a directory a project
        dry_run: Report matched directories instead of running the command
        verbose: Print a trace line for every matched directory
    """

    depth: Annotated[int, Field(ge=0)] = DEFAULT_DEPTH
    manifest: Annotated[str, Field(min_length=1)] = DEFAULT_MANIFEST
    dry_run: bool = False
    verbose: bool = False

    @property
    def initial_budget(self) -> int:
        """Depth budget handed to the root visit.

        The root consumes one unit, so a directory ``depth`` levels down
        is still visited with a budget of 1.
        """
        return self.depth + 1


@dataclass
class TraversalSummary:
    """What happened during one traversal."""

    matched: list[Path] = field(default_factory=list)
    executed: list[Path] = field(default_factory=list)
    warnings: list[CargoRecursiveError] = field(default_factory=list)
