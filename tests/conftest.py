"""
Shared pytest fixtures for cargo-recursive tests.

This module provides:
- clean_state: resets the service container and CARGO_RECURSIVE_* env vars
- make_tree: builds a directory tree with Cargo.toml markers
- python_command: builds an external command running the current interpreter
- ran_in: lists the directories a marker-writing command ran in
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from cargo_recursive.core.bootstrap import reset

MANIFEST_CONTENT = '[package]\nname = "demo"\nversion = "0.1.0"\n'
RUN_MARKER = "ran.txt"

# Appends one line to ran.txt in the working directory
MARK_SCRIPT = f"open({RUN_MARKER!r}, 'a').write('x\\n')"


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the environment and from other tests."""
    for key in list(os.environ):
        if key.startswith("CARGO_RECURSIVE_"):
            monkeypatch.delenv(key)
    reset()
    yield
    reset()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """
    Provide a helper that creates directories below a fresh root.

    Paths ending in Cargo.toml create a manifest, anything else a directory.

    Returns:
        A callable taking relative paths and returning the root
    """
    root = tmp_path / "root"
    root.mkdir()

    def build(*paths: str) -> Path:
        for rel in paths:
            target = root / rel
            if target.name == "Cargo.toml":
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(MANIFEST_CONTENT)
            else:
                target.mkdir(parents=True, exist_ok=True)
        return root

    return build


@pytest.fixture
def python_command() -> Callable[[str], list[str]]:
    """Provide a helper building `python -c <script>` tokens."""

    def build(script: str = MARK_SCRIPT) -> list[str]:
        return [sys.executable, "-c", script]

    return build


@pytest.fixture
def ran_in() -> Callable[[Path], set[str]]:
    """Provide a helper listing where the marker script ran, relative to root."""

    def collect(root: Path) -> set[str]:
        found = set()
        for marker in root.rglob(RUN_MARKER):
            rel = marker.parent.relative_to(root).as_posix()
            found.add(rel)
        return found

    return collect
