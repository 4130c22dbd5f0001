"""Recursive file listing relative to a root directory."""

from treewalk.walker import awalk
from treewalk.walker import walk

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "awalk",
    "walk",
]
