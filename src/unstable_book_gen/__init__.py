"""
Unstable Book Generator

Keeps the unstable book in sync with the unstable features declared in a
compiler source tree: writes stub pages for undocumented features, mirrors
the hand-written pages and generates SUMMARY.md.

Example:
    >>> from unstable_book_gen import UnstableBookGenerator
    >>> from pathlib import Path
    >>> UnstableBookGenerator(Path("src"), Path("build/unstable-book")).run()
"""

from unstable_book_gen.config import BookGenSettings
from unstable_book_gen.errors import (
    BookGenError,
    BookIOError,
    ConfigError,
    InconsistentRegistryError,
    UsageError,
)
from unstable_book_gen.features import (
    Feature,
    FeatureRegistry,
    Status,
    collect_unstable_feature_names,
)
from unstable_book_gen.orchestrator import GenerationReport, UnstableBookGenerator
from unstable_book_gen.reconcile import compute_missing_features, generate_unstable_book_files
from unstable_book_gen.renderers import render_summary
from unstable_book_gen.sections import (
    collect_section_file_names,
    feature_to_file_name,
    file_name_to_feature,
)

__version__ = "0.1.0"

__all__ = [
    "BookGenSettings",
    "BookGenError",
    "BookIOError",
    "ConfigError",
    "InconsistentRegistryError",
    "UsageError",
    "Feature",
    "FeatureRegistry",
    "Status",
    "collect_unstable_feature_names",
    "GenerationReport",
    "UnstableBookGenerator",
    "compute_missing_features",
    "generate_unstable_book_files",
    "render_summary",
    "collect_section_file_names",
    "feature_to_file_name",
    "file_name_to_feature",
    "__version__",
]
