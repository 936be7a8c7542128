"""End-to-end tests for UnstableBookGenerator."""

import pytest

from unstable_book_gen.config import BookGenSettings
from unstable_book_gen.errors import BookIOError, UsageError
from unstable_book_gen.orchestrator import UnstableBookGenerator


class TestUnstableBookGenerator:
    """Tests for a full generation run."""

    @pytest.fixture
    def report(self, source_tree, dest_dir):
        return UnstableBookGenerator(source_tree, dest_dir).run()

    def test_book_written_under_dest_src(self, report, dest_dir):
        """Test that the book is written below DEST/src."""
        assert report.book_dir == dest_dir / "src"
        assert report.summary_path == dest_dir / "src" / "SUMMARY.md"

    def test_lang_stubs(self, report, dest_dir):
        """Test that undocumented language features get stubs."""
        lang = dest_dir / "src" / "lang-features"

        assert sorted(p.name for p in report.stubs["lang-features"]) == [
            "foo-bar.md", "internal-thing.md", "old-gate.md",
        ]
        assert "[#1234]" in (lang / "foo-bar.md").read_text()
        assert "no tracking issue" in (lang / "internal-thing.md").read_text()
        assert "no tracking issue" in (lang / "old-gate.md").read_text()

    def test_lib_stubs(self, report, dest_dir):
        """Test that undocumented library features get stubs."""
        lib = dest_dir / "src" / "lib-features"

        assert sorted(p.name for p in report.stubs["lib-features"]) == [
            "core-intrinsics.md", "iter-ext.md",
        ]
        assert "[#27741]" in (lib / "iter-ext.md").read_text()
        assert report.total_stubs == 5

    def test_hand_written_pages_mirrored(self, report, dest_dir):
        """Test that hand-written pages are copied into the output."""
        book = dest_dir / "src"

        assert (book / "lang-features" / "documented-feature.md").read_text() == "# hand-written\n"
        assert (book / "compiler-flags" / "profile.md").exists()
        assert (book / "the-unstable-book.md").exists()
        assert report.mirrored_files == 3

    def test_summary(self, report):
        """Test that the summary lists flags and unstable features only."""
        summary = report.summary_path.read_text()

        assert "    - [profile](compiler-flags/profile.md)" in summary
        assert "    - [foo_bar](lang-features/foo-bar.md)" in summary
        assert "    - [documented_feature](lang-features/documented-feature.md)" in summary
        assert "    - [iter_ext](lib-features/iter-ext.md)" in summary
        assert "stable_gate" not in summary
        assert "rust1" not in summary

    def test_source_tree_untouched(self, report, source_tree):
        """Test that nothing is written into the source tree."""
        lang_src = source_tree / "doc/unstable-book/src/lang-features"
        assert [p.name for p in lang_src.iterdir()] == ["documented-feature.md"]

    def test_second_run_identical(self, source_tree, dest_dir):
        """Test that running twice produces the same output."""
        generator = UnstableBookGenerator(source_tree, dest_dir)
        generator.run()
        book = dest_dir / "src"
        first = {p: p.read_bytes() for p in book.rglob("*") if p.is_file()}

        generator.run()
        second = {p: p.read_bytes() for p in book.rglob("*") if p.is_file()}

        assert first == second

    def test_missing_section_dir_counts_as_empty(self, source_tree, dest_dir):
        """Test that a missing section directory is read as empty and not created."""
        lib_src = source_tree / "doc/unstable-book/src/lib-features"
        lib_src.rmdir()

        report = UnstableBookGenerator(source_tree, dest_dir).run()

        assert len(report.stubs["lib-features"]) == 2
        assert (dest_dir / "src" / "lib-features" / "iter-ext.md").exists()
        assert not lib_src.exists()

    def test_custom_settings(self, source_tree, dest_dir):
        """Test that settings change the section directory names."""
        settings = BookGenSettings(lang_features_dir="language-features")

        report = UnstableBookGenerator(source_tree, dest_dir, settings).run()

        assert (dest_dir / "src" / "language-features" / "foo-bar.md").exists()
        assert "language-features/foo-bar.md" in report.summary_path.read_text()

    def test_missing_source_root(self, tmp_path, dest_dir):
        """Test that a missing source root is a usage error."""
        with pytest.raises(UsageError):
            UnstableBookGenerator(tmp_path / "missing", dest_dir).run()

    def test_missing_gate_table(self, source_tree, dest_dir):
        """Test that a missing gate table aborts the run."""
        (source_tree / "libsyntax" / "feature_gate.rs").unlink()

        with pytest.raises(BookIOError):
            UnstableBookGenerator(source_tree, dest_dir).run()
