"""Tests for mirroring the book sources."""

import pytest

from unstable_book_gen.errors import BookIOError
from unstable_book_gen.mirror import copy_recursive

from conftest import write_tree


class TestCopyRecursive:
    """Tests for copy_recursive."""

    def test_copies_nested_tree(self, tmp_path):
        """Test that nested files are copied and counted."""
        src = write_tree(tmp_path / "src", {
            "top.md": "top",
            "lang-features/a.md": "a",
            "lang-features/deep/b.md": "b",
        })
        dest = tmp_path / "dest"
        dest.mkdir()

        copied = copy_recursive(src, dest)

        assert copied == 3
        assert (dest / "top.md").read_text() == "top"
        assert (dest / "lang-features" / "a.md").read_text() == "a"
        assert (dest / "lang-features" / "deep" / "b.md").read_text() == "b"

    def test_overwrites_and_keeps_existing(self, tmp_path):
        """Test that copied files overwrite and other files survive."""
        src = write_tree(tmp_path / "src", {"page.md": "new"})
        dest = write_tree(tmp_path / "dest", {"page.md": "old", "stub.md": "generated"})

        copy_recursive(src, dest)

        assert (dest / "page.md").read_text() == "new"
        assert (dest / "stub.md").read_text() == "generated"

    def test_copies_empty_directories(self, tmp_path):
        """Test that empty directories are recreated without counting files."""
        src = tmp_path / "src"
        (src / "empty").mkdir(parents=True)
        dest = tmp_path / "dest"
        dest.mkdir()

        assert copy_recursive(src, dest) == 0
        assert (dest / "empty").is_dir()

    def test_missing_source_raises(self, tmp_path):
        """Test that a missing source raises a read dir error."""
        with pytest.raises(BookIOError) as exc_info:
            copy_recursive(tmp_path / "missing", tmp_path)

        assert exc_info.value.operation == "read dir"
