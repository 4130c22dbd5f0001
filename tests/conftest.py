"""Shared fixtures for treewalk tests."""

from pathlib import Path

import pytest

# Same shape as the multi-level fixture tree: dicts are directories,
# None is an empty file.
MULTI_LEVEL = {
    "a": None,
    "b": {"a": None, "b": None},
    "c": None,
    "d": {
        "a": {"a": None, "b": None},
        "b": None,
        "c": None,
        "d": {"a": None, "b": {"a": None, "b": None}},
    },
    "e": None,
    "f": None,
}

MULTI_LEVEL_FILES = [
    "a",
    "b/a",
    "b/b",
    "c",
    "d/a/a",
    "d/a/b",
    "d/b",
    "d/c",
    "d/d/a",
    "d/d/b/a",
    "d/d/b/b",
    "e",
    "f",
]


def build_tree(root: Path, layout: dict) -> Path:
    """Create directories and empty files under root from a nested dict."""
    root.mkdir(parents=True, exist_ok=True)
    for name, child in layout.items():
        if child is None:
            (root / name).touch()
        else:
            build_tree(root / name, child)
    return root


@pytest.fixture
def multi_level(tmp_path):
    """A nested tree of 13 files."""
    return build_tree(tmp_path / "multi-level", MULTI_LEVEL)


@pytest.fixture
def one_level(tmp_path):
    """A directory holding two files."""
    return build_tree(tmp_path / "one-level", {"file-1": None, "file-2": None})


@pytest.fixture
def multi_level_files():
    """Expected walk of the multi_level tree with sorted listings."""
    return list(MULTI_LEVEL_FILES)


@pytest.fixture
def make_tree():
    """Return a function that creates a tree from a nested dict."""
    return build_tree
