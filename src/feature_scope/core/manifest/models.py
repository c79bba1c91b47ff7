"""Data models for parsed Cargo manifests: FeatureTable, FeatureReference, PackageNode.

These types are produced by the manifest parser and consumed by workspace
discovery and the resolver. They are immutable so that a node parsed once
per run can be shared freely between the topology index and the resolver.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from feature_scope.config import DEFAULT_FEATURE


# ---------------------------------------------------------------------------
# FeatureTable: a producer's capability declarations
# ---------------------------------------------------------------------------


class FeatureTable(Mapping[str, tuple[str, ...]]):
    """Capability declarations of a producer package.

    Maps each declared capability name to the ordered names it implies.
    The ``default`` entry always exists: it is synthesized as an empty
    list when the manifest omits it.
    """

    def __init__(self, features: Mapping[str, list[str] | tuple[str, ...]] | None = None) -> None:
        entries = {name: tuple(implied) for name, implied in (features or {}).items()}
        entries.setdefault(DEFAULT_FEATURE, ())
        self._features: dict[str, tuple[str, ...]] = entries

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._features[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FeatureTable):
            return self._features == other._features
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._features.items()))

    def __repr__(self) -> str:
        return f"FeatureTable({self._features!r})"

    def implied(self, name: str) -> tuple[str, ...]:
        """Return the names implied by *name*; unknown names imply nothing."""
        return self._features.get(name, ())

    def all_names(self) -> set[str]:
        """Every capability name mentioned in the table, as key or implication."""
        names = set(self._features)
        for implied in self._features.values():
            names.update(implied)
        return names


# ---------------------------------------------------------------------------
# FeatureReference: a consumer's request against a producer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureReference:
    """One ``[[package.metadata.feature-scope]]`` entry.

    Attributes:
        package: Name of the producer package.
        features: Requested capability names, in declaration order with
            duplicates removed.
        default_features: Mirrors ``default-features``. When True and
            ``features`` is empty the producer's ``default`` set is requested.
    """

    package: str
    features: tuple[str, ...] = ()
    default_features: bool = True

    @property
    def requests_defaults(self) -> bool:
        """True when this reference asks for the producer's ``default`` set."""
        return not self.features and self.default_features


# ---------------------------------------------------------------------------
# PackageNode: one parsed package
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackageNode:
    """A package in the build graph, as described by its manifest.

    Attributes:
        name: ``[package].name``, unique within a workspace.
        manifest_path: Path to the package's Cargo.toml.
        features: Declared capabilities, or None if the package declares
            no ``feature-scope-decl`` table.
        references: Capability references to other packages, in order.
    """

    name: str
    manifest_path: Path
    features: FeatureTable | None = None
    references: tuple[FeatureReference, ...] = field(default_factory=tuple)

    @property
    def root(self) -> Path:
        """Directory containing the manifest."""
        return self.manifest_path.parent

    @property
    def is_producer(self) -> bool:
        return self.features is not None
