"""Data models for treewalk."""

from dataclasses import dataclass
from enum import Enum
from enum import auto
from pathlib import Path
from typing import Self


class EntryKind(Enum):
    """What a directory entry turned out to be after stat."""

    FILE = auto()
    DIRECTORY = auto()
    OTHER = auto()  # fifos, sockets, devices, dangling symlinks


@dataclass
class Entry:
    """One immediate child of a directory being walked."""

    working_path: Path  # Root-prefixed path used for I/O
    relative_path: str  # '/'-separated path relative to the walk root

    @property
    def subtree_prefix(self) -> str:
        """Prefix for entries found beneath this one if it is a directory."""
        return f"{self.relative_path}/"

    @classmethod
    def child(cls, directory: Path, prefix: str, name: str) -> Self:
        """Build the entry for name listed inside directory."""
        return cls(
            working_path=directory / name,
            relative_path=f"{prefix}{name}",
        )
