"""
Feature registry.

A ``FeatureRegistry`` is a read-only mapping from feature identifier to
``Feature``. One registry holds the language features, another the library
features; both are built once per run and never mutated.

Example:
    >>> registry = FeatureRegistry([
    ...     Feature("foo_bar", Status.UNSTABLE, tracking_issue=1234),
    ...     Feature("baz", Status.STABLE, since="1.0.0"),
    ... ])
    >>> sorted(collect_unstable_feature_names(registry))
    ['foo_bar']
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from unstable_book_gen.errors import InconsistentRegistryError


class Status(str, Enum):
    """Stability level of a feature."""

    STABLE = "stable"
    UNSTABLE = "unstable"


@dataclass(frozen=True)
class Feature:
    """A declared compiler or library feature.

    Attributes:
        name: Feature identifier, words separated by ``_``
        level: Stability level
        tracking_issue: Tracking issue number, if any
        since: Version the feature was introduced or stabilized in
        source: File the declaration was read from
    """

    name: str
    level: Status
    tracking_issue: int | None = None
    since: str | None = None
    source: Path | None = None

    @property
    def is_unstable(self) -> bool:
        return self.level is Status.UNSTABLE


class FeatureRegistry(Mapping[str, Feature]):
    """Immutable mapping of feature identifier to ``Feature``.

    Raises:
        InconsistentRegistryError: If two features share an identifier
    """

    def __init__(self, features: Iterable[Feature] = ()):
        entries: dict[str, Feature] = {}
        for feature in features:
            if feature.name in entries:
                raise InconsistentRegistryError(
                    feature.name, f"Feature {feature.name!r} is declared more than once"
                )
            entries[feature.name] = feature
        self._features = MappingProxyType(entries)

    def __getitem__(self, name: str) -> Feature:
        return self._features[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __repr__(self) -> str:
        return f"FeatureRegistry({len(self)} features)"


def collect_unstable_feature_names(features: Mapping[str, Feature]) -> frozenset[str]:
    """Return the identifiers of all unstable features in ``features``."""
    return frozenset(name for name, feature in features.items() if feature.is_unstable)


def has_valid_tracking_issue(feature: Feature) -> bool:
    """True if the feature has a tracking issue number greater than zero."""
    return feature.tracking_issue is not None and feature.tracking_issue > 0
