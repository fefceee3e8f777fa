"""
Traversal services.

Depth-bounded discovery of project directories.
"""

from .engine import TraversalEngine

__all__ = ["TraversalEngine"]
