"""Tests for entry classification."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treewalk.exceptions import ClassificationError
from treewalk.files import classify
from treewalk.models import EntryKind


class TestClassify:
    """Tests for classify()."""

    def test_regular_file(self, tmp_path):
        """Test that a regular file is a FILE."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("content")

        assert classify(file_path) is EntryKind.FILE

    def test_directory(self, tmp_path):
        """Test that a directory is a DIRECTORY."""
        subdir = tmp_path / "subdir"
        subdir.mkdir()

        assert classify(subdir) is EntryKind.DIRECTORY

    def test_symlink_to_file_is_file(self, tmp_path):
        """Test that symlinks are followed to their target file."""
        target = tmp_path / "target.txt"
        target.touch()
        link = tmp_path / "link.txt"
        link.symlink_to(target)

        assert classify(link) is EntryKind.FILE

    def test_symlink_to_directory_is_directory(self, tmp_path):
        """Test that symlinks are followed to their target directory."""
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)

        assert classify(link) is EntryKind.DIRECTORY

    def test_dangling_symlink_is_other(self, tmp_path):
        """Test that a symlink to a missing target is OTHER, not an error."""
        link = tmp_path / "broken"
        link.symlink_to(tmp_path / "missing")

        assert classify(link) is EntryKind.OTHER

    def test_symlink_loop_is_other(self, tmp_path):
        """Test that a symlink pointing at itself is OTHER, not an error."""
        loop = tmp_path / "loop"
        loop.symlink_to(loop)

        assert classify(loop) is EntryKind.OTHER

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
    def test_fifo_is_other(self, tmp_path):
        """Test that a named pipe is OTHER."""
        fifo = tmp_path / "pipe"
        os.mkfifo(fifo)

        assert classify(fifo) is EntryKind.OTHER

    def test_missing_entry_raises(self, tmp_path):
        """Test that an entry removed after listing raises ClassificationError."""
        missing = tmp_path / "gone"

        with pytest.raises(ClassificationError) as exc_info:
            classify(missing)

        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_stat_permission_error_raises(self, tmp_path):
        """Test that stat failures other than a missing entry abort."""
        file_path = tmp_path / "file.txt"
        file_path.touch()

        with patch.object(
            Path, "stat", side_effect=PermissionError(13, "Permission denied")
        ):
            with pytest.raises(ClassificationError) as exc_info:
                classify(file_path)

        assert isinstance(exc_info.value.cause, PermissionError)
