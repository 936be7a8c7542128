"""
Feature extraction from a compiler source tree.

Builds the language and library ``FeatureRegistry`` instances that the
reconciler consumes. Extraction is line based and deliberately shallow:

- Language features come from the feature-gate table, one declaration per
  line, e.g. ``(active, foo_bar, "1.0.0", Some(1234)),``.
- Library features come from ``#[unstable(...)]`` and ``#[stable(...)]``
  attributes in ``*.rs`` files anywhere below the source root.

Example:
    >>> lang = collect_lang_features(Path("src"))
    >>> lib = collect_lib_features(Path("src"), lang)
"""

import os
import re
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from unstable_book_gen.errors import BookIOError, io_operation
from unstable_book_gen.features import Feature, FeatureRegistry, Status
from unstable_book_gen.logging import get_logger

log = get_logger(__name__)

DEFAULT_LANG_FEATURES_FILE = Path("libsyntax/feature_gate.rs")
DEFAULT_SKIP_DIRS = ("test", "tests", "target", "build", ".git", "doc", "etc", "llvm", "jemalloc")

# Gate kind -> stability
GATE_LEVELS = {
    "active": Status.UNSTABLE,
    "removed": Status.UNSTABLE,
    "accepted": Status.STABLE,
}

GATE_PATTERN = re.compile(
    r"""^\s*\(\s*(?P<kind>active|removed|accepted)\s*,
        \s*(?P<name>\w+)\s*,
        \s*"(?P<since>[^"]*)"\s*,
        \s*(?:Some\(\s*(?P<issue>\d+)\s*\)|None)""",
    re.VERBOSE,
)

ATTR_PATTERN = re.compile(r"\[(?P<level>unstable|stable)\(")
FEATURE_PATTERN = re.compile(r'\bfeature\s*=\s*"(?P<value>[^"]*)"')
SINCE_PATTERN = re.compile(r'\bsince\s*=\s*"(?P<value>[^"]*)"')
ISSUE_PATTERN = re.compile(r'\bissue\s*=\s*"(?P<value>[^"]*)"')


def parse_gate_line(line: str, source: Path | None = None) -> Feature | None:
    """Parse one feature-gate declaration, or return None if the line is not one."""
    match = GATE_PATTERN.match(line)
    if match is None:
        return None

    issue = match.group("issue")
    return Feature(
        name=match.group("name"),
        level=GATE_LEVELS[match.group("kind")],
        tracking_issue=int(issue) if issue is not None else None,
        since=match.group("since"),
        source=source,
    )


def parse_stability_attribute(line: str, source: Path | None = None) -> Feature | None:
    """Parse a ``#[stable(...)]`` / ``#[unstable(...)]`` attribute line.

    An issue of ``"0"`` (or one that is not a number) means no tracking issue.
    Stable features never carry an issue.
    """
    attr = ATTR_PATTERN.search(line)
    if attr is None:
        return None

    feature = FEATURE_PATTERN.search(line)
    if feature is None:
        return None

    level = Status.UNSTABLE if attr.group("level") == "unstable" else Status.STABLE
    since = SINCE_PATTERN.search(line)

    tracking_issue = None
    issue = ISSUE_PATTERN.search(line)
    if level is Status.UNSTABLE and issue is not None and issue.group("value").isdigit():
        tracking_issue = int(issue.group("value")) or None

    return Feature(
        name=feature.group("value"),
        level=level,
        tracking_issue=tracking_issue,
        since=since.group("value") if since else None,
        source=source,
    )


def collect_lang_features(
    src_root: Path,
    features_file: Path = DEFAULT_LANG_FEATURES_FILE,
) -> FeatureRegistry:
    """Collect language features from the feature-gate table.

    Args:
        src_root: Root of the compiler source tree
        features_file: Gate table location relative to ``src_root``

    Returns:
        Registry of language features

    Raises:
        BookIOError: If the gate table cannot be read
        InconsistentRegistryError: If a feature is declared twice
    """
    path = Path(src_root) / features_file
    with io_operation("read file", path):
        contents = path.read_text(encoding="utf-8")

    features = [
        feature
        for feature in (parse_gate_line(line, path) for line in contents.splitlines())
        if feature is not None
    ]
    log.debug("extract.lang_features", path=str(path), count=len(features))
    return FeatureRegistry(features)


def iter_source_files(src_root: Path, skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS) -> Iterator[Path]:
    """Yield ``*.rs`` files below ``src_root`` in sorted order, skipping ``skip_dirs``.

    Raises:
        BookIOError: If a directory cannot be listed
    """
    skip = set(skip_dirs)

    def raise_read_dir(err: OSError) -> None:
        raise BookIOError("read dir", err.filename or src_root, err) from err

    for dirpath, dirnames, filenames in os.walk(src_root, onerror=raise_read_dir):
        dirnames[:] = sorted(name for name in dirnames if name not in skip)
        for filename in sorted(filenames):
            if filename.endswith(".rs"):
                yield Path(dirpath) / filename


def collect_lib_features(
    src_root: Path,
    lang_features: Mapping[str, Feature],
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> FeatureRegistry:
    """Collect library features from stability attributes.

    The first declaration of an identifier wins. A declaration that
    duplicates a language feature, or restates a library feature with a
    different stability level, is logged and skipped.

    Args:
        src_root: Root of the compiler source tree
        lang_features: Already collected language features
        skip_dirs: Directory names to ignore

    Returns:
        Registry of library features
    """
    features: dict[str, Feature] = {}

    for path in iter_source_files(src_root, skip_dirs):
        with io_operation("read file", path):
            contents = path.read_text(encoding="utf-8", errors="replace")

        for lineno, line in enumerate(contents.splitlines(), start=1):
            feature = parse_stability_attribute(line, path)
            if feature is None:
                continue

            if feature.name in lang_features:
                log.warning(
                    "extract.duplicate_lang_feature",
                    feature=feature.name, path=str(path), line=lineno,
                )
                continue

            existing = features.get(feature.name)
            if existing is None:
                features[feature.name] = feature
            elif existing.level is not feature.level:
                log.warning(
                    "extract.conflicting_level",
                    feature=feature.name, path=str(path), line=lineno,
                    first=existing.level.value, second=feature.level.value,
                )

    log.debug("extract.lib_features", root=str(src_root), count=len(features))
    return FeatureRegistry(features.values())
