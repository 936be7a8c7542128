"""
Unstable book generation orchestrator.

Coordinates one run: extracting the feature registries, writing stub pages
for undocumented features, mirroring the hand-written book sources and
writing SUMMARY.md.

Example:
    >>> generator = UnstableBookGenerator(Path("src"), Path("build/unstable-book"))
    >>> report = generator.run()
    >>> report.total_stubs
    42
"""

from dataclasses import dataclass, field
from pathlib import Path

from unstable_book_gen.config import BookGenSettings
from unstable_book_gen.errors import UsageError, io_operation
from unstable_book_gen.extract import collect_lang_features, collect_lib_features
from unstable_book_gen.features import FeatureRegistry
from unstable_book_gen.logging import get_logger, log_step
from unstable_book_gen.mirror import copy_recursive
from unstable_book_gen.reconcile import generate_unstable_book_files
from unstable_book_gen.renderers import StubRenderer, SummaryRenderer

log = get_logger(__name__)


@dataclass
class GenerationReport:
    """Outcome of a generation run."""

    book_dir: Path
    stubs: dict[str, list[Path]] = field(default_factory=dict)
    mirrored_files: int = 0
    summary_path: Path | None = None

    @property
    def total_stubs(self) -> int:
        return sum(len(paths) for paths in self.stubs.values())


class UnstableBookGenerator:
    """Run the unstable book generation pipeline.

    Architecture:
        ```
        UnstableBookGenerator.run()
              │
              ├──► collect_lang_features / collect_lib_features
              │
              ├──► generate_unstable_book_files  (language, library)
              │         └──► dest/src/<section>/<feature>.md
              │
              ├──► copy_recursive  (book sources ──► dest/src)
              │
              └──► SummaryRenderer.generate_summary  ──► dest/src/SUMMARY.md
        ```

    Guardrails:
        - Every stage is fatal on error; no partial results are reported
        - Stubs are written before the mirror so hand-written pages sit
          next to them in the output tree
    """

    def __init__(
        self,
        src_root: Path,
        dest_root: Path,
        settings: BookGenSettings | None = None,
    ):
        """Initialize the generator.

        Args:
            src_root: Root of the compiler source tree
            dest_root: Output root; the book is written to ``dest_root/src``
            settings: Settings (defaults are used if omitted)
        """
        self.src_root = Path(src_root)
        self.dest_root = Path(dest_root)
        self.settings = settings or BookGenSettings()

        self.stub_renderer = StubRenderer(template_dir=self.settings.template_dir)
        self.summary_renderer = SummaryRenderer(
            template_dir=self.settings.template_dir,
            compiler_flags_dir=self.settings.compiler_flags_dir,
            lang_features_dir=self.settings.lang_features_dir,
            lib_features_dir=self.settings.lib_features_dir,
        )

    @property
    def book_src(self) -> Path:
        return self.src_root / self.settings.doc_path

    @property
    def book_dest(self) -> Path:
        return self.dest_root / "src"

    def collect_features(self) -> tuple[FeatureRegistry, FeatureRegistry]:
        """Extract the language and library registries from the source tree."""
        with log_step("extract", root=str(self.src_root)) as timer:
            lang_features = collect_lang_features(
                self.src_root, self.settings.lang_features_file
            )
            lib_features = collect_lib_features(
                self.src_root, lang_features, self.settings.skip_dirs
            )
            timer.add_metric("lang_features", len(lang_features))
            timer.add_metric("lib_features", len(lib_features))
        return lang_features, lib_features

    def reconcile(
        self,
        section: str,
        features: FeatureRegistry,
    ) -> list[Path]:
        """Write stubs for one section directory (e.g. ``lang-features``).

        A section directory missing from the book sources counts as empty.
        """
        section_dir = self.book_src / section
        if not section_dir.is_dir():
            log.debug("reconcile.no_sections", section=section, path=str(section_dir))
            section_dir = None

        with log_step(f"reconcile.{section}", features=len(features)) as timer:
            written = generate_unstable_book_files(
                features,
                section_dir,
                self.book_dest / section,
                renderer=self.stub_renderer,
            )
            timer.add_metric("generated", len(written))
        return written

    def run(self) -> GenerationReport:
        """Run the full pipeline.

        Returns:
            GenerationReport describing what was written

        Raises:
            UsageError: If the source root does not exist
            BookGenError: On any other failure
        """
        if not self.src_root.is_dir():
            raise UsageError(f"Source path {self.src_root} is not a directory")

        lang_features, lib_features = self.collect_features()

        with io_operation("create dir", self.book_dest):
            self.book_dest.mkdir(parents=True, exist_ok=True)

        report = GenerationReport(book_dir=self.book_dest)
        report.stubs[self.settings.lang_features_dir] = self.reconcile(
            self.settings.lang_features_dir, lang_features
        )
        report.stubs[self.settings.lib_features_dir] = self.reconcile(
            self.settings.lib_features_dir, lib_features
        )

        with log_step("mirror", src=str(self.book_src), dest=str(self.book_dest)) as timer:
            report.mirrored_files = copy_recursive(self.book_src, self.book_dest)
            timer.add_metric("files", report.mirrored_files)

        compiler_flags_dir = self.book_dest / self.settings.compiler_flags_dir
        with io_operation("create dir", compiler_flags_dir):
            compiler_flags_dir.mkdir(parents=True, exist_ok=True)

        with log_step("summary", book_dir=str(self.book_dest)):
            report.summary_path = self.summary_renderer.generate_summary(
                self.book_dest,
                lang_features,
                lib_features,
                summary_file=self.settings.summary_file,
            )

        log.info(
            "generation.complete",
            stubs=report.total_stubs,
            mirrored_files=report.mirrored_files,
            summary=str(report.summary_path),
        )
        return report
