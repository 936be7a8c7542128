"""
Section file scanning and the feature <-> file name rule.

Each feature documented in the book has one section file named after the
feature identifier with ``_`` replaced by ``-`` and an ``.md`` suffix.
"""

from pathlib import Path

from unstable_book_gen.errors import io_operation

SECTION_SUFFIX = ".md"


def feature_to_file_name(name: str) -> str:
    """``my_feature`` -> ``my-feature.md``."""
    return f"{name.replace('_', '-')}{SECTION_SUFFIX}"


def file_name_to_feature(file_name: str) -> str:
    """``my-feature.md`` -> ``my_feature``."""
    return Path(file_name).stem.replace("-", "_")


def collect_section_file_names(directory: Path) -> frozenset[str]:
    """Return the feature identifiers that already have a section file.

    Only direct children of ``directory`` that are files are considered.
    The directory must exist.

    Raises:
        BookIOError: If the directory cannot be listed
    """
    with io_operation("read dir", directory):
        entries = [entry for entry in Path(directory).iterdir() if entry.is_file()]

    return frozenset(file_name_to_feature(entry.name) for entry in entries)
