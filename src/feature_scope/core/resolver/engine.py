"""Feature-scope resolution engine.

Given a target package and the workspace topology, computes which scope
features are active for the target and the full vocabulary of legal
feature names.

Resolution Policy
-----------------
1. The vocabulary starts with every name in the target's own declaration
   table, plus ``default``.
2. Each ``[[package.metadata.feature-scope]]`` reference of the target is
   checked against its producer. Missing producers, producers without a
   declaration table, and unknown requested features are recorded as
   diagnostics and contribute nothing. Otherwise the producer's names join
   the vocabulary and each requested feature's closure is activated. A
   reference with no features and ``default-features = true`` activates
   the producer's ``default`` closure.
3. If no reference names a concrete feature (including the case of no
   references at all), the target's own ``default`` closure is activated.
4. ``default`` and every activated name are added to the vocabulary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from feature_scope.config import DEFAULT_FEATURE
from feature_scope.core.manifest import FeatureTable
from feature_scope.core.resolver import diagnostics as diag
from feature_scope.core.resolver.diagnostics import Diagnostic
from feature_scope.core.resolver.expansion import expand
from feature_scope.core.workspace import WorkspaceTopology
from feature_scope.exceptions import PackageNotFoundError

logger = logging.getLogger(__name__)

_EMPTY_TABLE = FeatureTable()


# ---------------------------------------------------------------------------
# ResolutionResult: output of resolving one package
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolutionResult:
    """Resolved scope features for one package.

    Attributes:
        target: Name of the resolved package.
        activated: Feature names to enable.
        vocabulary: Every legal feature name; a superset of ``activated``.
        diagnostics: Recoverable problems, in the order they were found.
    """

    target: str
    activated: frozenset[str] = frozenset()
    vocabulary: frozenset[str] = frozenset({DEFAULT_FEATURE})
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def inactive(self) -> frozenset[str]:
        """Legal names that are not enabled."""
        return self.vocabulary - self.activated

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)


# ---------------------------------------------------------------------------
# FeatureResolver
# ---------------------------------------------------------------------------


class FeatureResolver:
    """Stateless resolver over a fixed workspace topology.

    Each ``resolve`` call builds its sets locally, so one instance may be
    reused for any number of targets.

    Args:
        topology: Packages visible to the resolver.
    """

    def __init__(self, topology: WorkspaceTopology) -> None:
        self._topology = topology

    @property
    def topology(self) -> WorkspaceTopology:
        return self._topology

    def resolve(self, target: str) -> ResolutionResult:
        """Resolve the scope features of *target*.

        Raises:
            PackageNotFoundError: If *target* is not in the topology.
        """
        node = self._topology.get(target)
        if node is None:
            raise PackageNotFoundError(
                f"Package {target!r} not found in workspace", self._topology.root_manifest
            )

        own_table = node.features or _EMPTY_TABLE
        vocabulary: set[str] = own_table.all_names()
        activated: set[str] = set()
        found: list[Diagnostic] = []

        for ref in node.references:
            producer = self._topology.get(ref.package)
            if producer is None:
                found.append(diag.package_not_found(node.name, ref.package, node.manifest_path))
                continue
            if producer.features is None:
                found.append(diag.no_declarations(node.name, ref.package, node.manifest_path))
                continue

            table = producer.features
            vocabulary |= table.all_names()
            for feature in ref.features:
                if feature not in table:
                    found.append(
                        diag.unknown_capability(node.name, ref.package, feature, node.manifest_path)
                    )
                    continue
                activated |= expand(feature, table)
            if ref.requests_defaults:
                activated |= expand(DEFAULT_FEATURE, table)

        if not any(ref.features for ref in node.references):
            activated |= expand(DEFAULT_FEATURE, own_table)

        vocabulary.add(DEFAULT_FEATURE)
        vocabulary |= activated

        for item in found:
            logger.debug("%s: %s", item.package, item.message)
        logger.debug(
            "Resolved %s: %d active of %d legal features",
            node.name, len(activated), len(vocabulary),
        )
        return ResolutionResult(
            target=node.name,
            activated=frozenset(activated),
            vocabulary=frozenset(vocabulary),
            diagnostics=tuple(found),
        )

    def resolve_all(self) -> list[ResolutionResult]:
        """Resolve every package in the topology, sorted by name."""
        return [self.resolve(name) for name in sorted(self._topology.members)]


def resolve(target: str, topology: WorkspaceTopology) -> ResolutionResult:
    """Resolve *target* against *topology*; see ``FeatureResolver.resolve``."""
    return FeatureResolver(topology).resolve(target)
