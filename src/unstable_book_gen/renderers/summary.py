"""
SUMMARY.md renderer.

Generates the book's table of contents from three listings: compiler flag
sections found on disk, unstable language features and unstable library
features. Entries are sorted so the output is stable between runs.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path

from unstable_book_gen.features import Feature, collect_unstable_feature_names
from unstable_book_gen.renderers.base import BaseRenderer
from unstable_book_gen.sections import collect_section_file_names, feature_to_file_name

COMPILER_FLAGS_DIR = "compiler-flags"
LANG_FEATURES_DIR = "lang-features"
LIB_FEATURES_DIR = "lib-features"
SUMMARY_FILE = "SUMMARY.md"


def render_entries(names: Iterable[str], section_dir: str) -> str:
    """Render one link line per name, each terminated by a newline.

    Example:
        >>> render_entries({"foo_bar"}, "lang-features")
        '    - [foo_bar](lang-features/foo-bar.md)\\n'
    """
    return "".join(
        f"    - [{name}]({section_dir}/{feature_to_file_name(name)})\n"
        for name in sorted(names)
    )


class SummaryRenderer(BaseRenderer):
    """Render the unstable book's SUMMARY.md."""

    template_name = SUMMARY_FILE

    def __init__(
        self,
        template_dir: Path | None = None,
        compiler_flags_dir: str = COMPILER_FLAGS_DIR,
        lang_features_dir: str = LANG_FEATURES_DIR,
        lib_features_dir: str = LIB_FEATURES_DIR,
    ):
        super().__init__(template_dir)
        self.compiler_flags_dir = compiler_flags_dir
        self.lang_features_dir = lang_features_dir
        self.lib_features_dir = lib_features_dir

    def render(
        self,
        compiler_flags: Iterable[str],
        lang_features: Iterable[str],
        lib_features: Iterable[str],
    ) -> str:
        """Render the summary from three identifier sets."""
        return self._render_template(
            self.template_name,
            compiler_flags=render_entries(compiler_flags, self.compiler_flags_dir),
            language_features=render_entries(lang_features, self.lang_features_dir),
            library_features=render_entries(lib_features, self.lib_features_dir),
        )

    def render_summary(
        self,
        compiler_flags_dir: Path,
        lang_features: Mapping[str, Feature],
        lib_features: Mapping[str, Feature],
    ) -> str:
        """Render the summary from a compiler-flags directory and two registries."""
        return self.render(
            collect_section_file_names(compiler_flags_dir),
            collect_unstable_feature_names(lang_features),
            collect_unstable_feature_names(lib_features),
        )

    def generate_summary(
        self,
        book_dir: Path,
        lang_features: Mapping[str, Feature],
        lib_features: Mapping[str, Feature],
        summary_file: str = SUMMARY_FILE,
    ) -> Path:
        """Write ``book_dir/SUMMARY.md``, scanning ``book_dir/compiler-flags``."""
        content = self.render_summary(
            Path(book_dir) / self.compiler_flags_dir, lang_features, lib_features
        )
        return self.write_page(Path(book_dir) / summary_file, content)


def render_summary(
    compiler_flags_dir: Path,
    lang_features: Mapping[str, Feature],
    lib_features: Mapping[str, Feature],
) -> str:
    """Render SUMMARY.md content with the packaged template and default section names."""
    return SummaryRenderer().render_summary(compiler_flags_dir, lang_features, lib_features)
