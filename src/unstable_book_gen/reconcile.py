"""
Reconcile a feature registry with a directory of section files.

For every unstable feature that has no hand-written section, a stub page is
written to the output directory. Nothing is ever deleted: pages for features
that were removed from the registry stay where they are.
"""

from collections.abc import Mapping
from pathlib import Path

from unstable_book_gen.errors import InconsistentRegistryError, io_operation
from unstable_book_gen.features import (
    Feature,
    collect_unstable_feature_names,
    has_valid_tracking_issue,
)
from unstable_book_gen.logging import get_logger
from unstable_book_gen.renderers.stub import StubRenderer
from unstable_book_gen.sections import collect_section_file_names, feature_to_file_name

log = get_logger(__name__)


def compute_missing_features(
    features: Mapping[str, Feature],
    section_names: frozenset[str] | set[str],
) -> frozenset[str]:
    """Unstable feature identifiers that have no section file."""
    return collect_unstable_feature_names(features) - frozenset(section_names)


def generate_unstable_book_files(
    features: Mapping[str, Feature],
    section_dir: Path | None,
    out_dir: Path,
    renderer: StubRenderer | None = None,
) -> list[Path]:
    """Write a stub page to ``out_dir`` for each undocumented unstable feature.

    Args:
        features: Registry to reconcile
        section_dir: Directory of hand-written section files (must exist),
            or None when the section has no hand-written pages
        out_dir: Directory receiving the stubs (created if absent)
        renderer: Stub renderer; a default one is used if omitted

    Returns:
        Paths of the written stub pages, sorted by feature name

    Raises:
        BookIOError: On any directory or file failure
        InconsistentRegistryError: If a missing identifier has no Feature
    """
    renderer = renderer or StubRenderer()
    out_dir = Path(out_dir)

    section_names = collect_section_file_names(section_dir) if section_dir is not None else frozenset()
    missing = compute_missing_features(features, section_names)

    with io_operation("create dir", out_dir):
        out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name in sorted(missing):
        feature = features.get(name)
        if feature is None:
            raise InconsistentRegistryError(name)

        path = out_dir / feature_to_file_name(name)
        if has_valid_tracking_issue(feature):
            renderer.generate_stub_issue(path, name, feature.tracking_issue)
        else:
            renderer.generate_stub_no_issue(path, name)

        log.debug("stub.generated", feature=name, path=str(path), issue=feature.tracking_issue)
        written.append(path)

    return written
