"""Filesystem primitives for treewalk."""

from treewalk.files.classify import classify
from treewalk.files.listing import list_directory

__all__ = [
    "classify",
    "list_directory",
]
