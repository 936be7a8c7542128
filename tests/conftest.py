"""Pytest configuration and shared fixtures."""

import textwrap
from pathlib import Path

import pytest

from unstable_book_gen.features import Feature, FeatureRegistry, Status


FEATURE_GATE_RS = """\
declare_features! (
    (active, foo_bar, "1.0.0", Some(1234)),
    (active, internal_thing, "1.0.0", None),
    (active, documented_feature, "1.2.0", Some(42)),
    (removed, old_gate, "1.0.0", Some(0)),
    (accepted, stable_gate, "1.0.0", None),
);
"""

LIBCORE_RS = """\
#[unstable(feature = "core_intrinsics", issue = "0")]
pub mod intrinsics {}

#[unstable(feature = "iter_ext", issue = "27741")]
pub trait IterExt {}

#[stable(feature = "rust1", since = "1.0.0")]
pub mod option {}

#[unstable(feature = "foo_bar", issue = "1")]
pub fn duplicated_lang_feature() {}
"""

TEST_ONLY_RS = """\
#[unstable(feature = "test_only", issue = "99")]
fn helper() {}
"""


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> content) below ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
    return root


@pytest.fixture
def source_tree(tmp_path):
    """A small compiler source tree with a partially written unstable book."""
    root = tmp_path / "rust" / "src"
    write_tree(root, {
        "libsyntax/feature_gate.rs": FEATURE_GATE_RS,
        "libcore/lib.rs": LIBCORE_RS,
        "libcore/tests/helpers.rs": TEST_ONLY_RS,
        "doc/unstable-book/src/the-unstable-book.md": "# The Unstable Book\n",
        "doc/unstable-book/src/lang-features/documented-feature.md": "# hand-written\n",
        "doc/unstable-book/src/compiler-flags/profile.md": "# `profile`\n",
    })
    (root / "doc/unstable-book/src/lib-features").mkdir(parents=True)
    return root


@pytest.fixture
def dest_dir(tmp_path):
    """Output root for generation runs."""
    return tmp_path / "out"


@pytest.fixture
def lang_registry():
    """Language registry with one feature of each kind."""
    return FeatureRegistry([
        Feature("foo_bar", Status.UNSTABLE, tracking_issue=1234),
        Feature("no_issue", Status.UNSTABLE),
        Feature("zero_issue", Status.UNSTABLE, tracking_issue=0),
        Feature("stable_one", Status.STABLE, since="1.0.0"),
    ])


@pytest.fixture
def lib_registry():
    """Library registry with two unstable features and a stable one."""
    return FeatureRegistry([
        Feature("iter_ext", Status.UNSTABLE, tracking_issue=27741),
        Feature("core_intrinsics", Status.UNSTABLE),
        Feature("rust1", Status.STABLE, since="1.0.0"),
    ])


@pytest.fixture
def section_dir(tmp_path):
    """Empty section directory."""
    path = tmp_path / "sections"
    path.mkdir()
    return path


@pytest.fixture
def out_dir(tmp_path):
    """Stub output directory (not created)."""
    return tmp_path / "generated"
