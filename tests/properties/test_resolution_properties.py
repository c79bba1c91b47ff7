"""Property-based tests for scope-feature resolution.

Verifies over randomly generated declaration tables (including cyclic
ones) that:
    - Expansion terminates and contains its root when the root is declared.
    - Expansion is closed under implication.
    - Activated features are always a subset of the vocabulary.
    - ``default`` is always legal.
    - A package with no references resolves like a standalone package.
"""
from __future__ import annotations

from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from feature_scope.config import DEFAULT_FEATURE
from feature_scope.core.emission import ActivateSymbol, DeclareLegalSymbol, emit
from feature_scope.core.manifest import FeatureReference, FeatureTable, PackageNode
from feature_scope.core.resolver import FeatureResolver, expand
from feature_scope.core.workspace import WorkspaceTopology

ROOT = Path("/ws")


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

feature_names = st.sampled_from(["default", "a", "b", "c", "d", "e", "f"])

# Implications may point at undeclared names and may form cycles.
declarations = st.dictionaries(
    keys=feature_names,
    values=st.lists(feature_names, max_size=4),
    max_size=7,
)

requests = st.lists(feature_names, max_size=4, unique=True)


def _node(name: str, decl=None, refs=()) -> PackageNode:
    return PackageNode(
        name=name,
        manifest_path=ROOT / name / "Cargo.toml",
        features=FeatureTable(decl) if decl is not None else None,
        references=tuple(refs),
    )


# ---------------------------------------------------------------------------
# Expansion closure
# ---------------------------------------------------------------------------


class TestExpansionProperties:
    """Closure laws for ``expand``."""

    @given(decl=declarations, root=feature_names)
    def test_terminates_and_contains_root(self, decl: dict, root: str) -> None:
        table = FeatureTable(decl)
        assert root in expand(root, table)

    @given(decl=declarations, root=feature_names)
    def test_closed_under_implication(self, decl: dict, root: str) -> None:
        table = FeatureTable(decl)
        closure = expand(root, table)
        for name in closure:
            assert set(table.implied(name)) <= closure

    @given(decl=declarations, root=feature_names)
    def test_idempotent(self, decl: dict, root: str) -> None:
        """Expanding any member of a closure stays inside the closure."""
        table = FeatureTable(decl)
        closure = expand(root, table)
        for name in closure:
            assert expand(name, table) <= closure


# ---------------------------------------------------------------------------
# Resolution invariants
# ---------------------------------------------------------------------------


class TestResolutionProperties:
    """Invariants of ``FeatureResolver.resolve`` over random workspaces."""

    @given(
        producer_decl=declarations,
        consumer_decl=st.one_of(st.none(), declarations),
        requested=requests,
        default_features=st.booleans(),
    )
    @settings(max_examples=200)
    def test_activated_subset_of_vocabulary(
        self,
        producer_decl: dict,
        consumer_decl: dict | None,
        requested: list[str],
        default_features: bool,
    ) -> None:
        producer = _node("lib", producer_decl)
        consumer = _node(
            "app",
            consumer_decl,
            [
                FeatureReference("lib", tuple(requested), default_features),
                FeatureReference("missing", ("x",)),
            ],
        )
        topology = WorkspaceTopology(root=ROOT, members={"lib": producer, "app": consumer})
        result = FeatureResolver(topology).resolve("app")
        assert result.activated <= result.vocabulary
        assert DEFAULT_FEATURE in result.vocabulary

    @given(decl=declarations)
    def test_no_references_equals_standalone(self, decl: dict) -> None:
        node = _node("solo", decl)
        in_workspace = WorkspaceTopology(
            root=ROOT, members={"solo": node, "other": _node("other", {"z": []})}
        )
        standalone = WorkspaceTopology(root=ROOT, members={"solo": node}, standalone=True)
        lhs = FeatureResolver(in_workspace).resolve("solo")
        rhs = FeatureResolver(standalone).resolve("solo")
        assert lhs.activated == rhs.activated
        assert lhs.vocabulary == rhs.vocabulary
        assert lhs.activated == expand(DEFAULT_FEATURE, FeatureTable(decl))

    @given(producer_decl=declarations, requested=requests)
    def test_resolution_is_deterministic(self, producer_decl: dict, requested: list[str]) -> None:
        producer = _node("lib", producer_decl)
        consumer = _node("app", None, [FeatureReference("lib", tuple(requested))])
        topology = WorkspaceTopology(root=ROOT, members={"lib": producer, "app": consumer})
        resolver = FeatureResolver(topology)
        assert resolver.resolve("app") == resolver.resolve("app")


# ---------------------------------------------------------------------------
# Emission
# ---------------------------------------------------------------------------


class TestEmissionProperties:
    """Directive lists mirror the resolution they came from."""

    @given(producer_decl=declarations, requested=requests)
    def test_one_directive_per_name(self, producer_decl: dict, requested: list[str]) -> None:
        producer = _node("lib", producer_decl)
        consumer = _node("app", None, [FeatureReference("lib", tuple(requested))])
        topology = WorkspaceTopology(root=ROOT, members={"lib": producer, "app": consumer})
        result = FeatureResolver(topology).resolve("app")
        directives = emit(result, "__scope_")

        activations = [d.name for d in directives if isinstance(d, ActivateSymbol)]
        declarations_ = [d.name for d in directives if isinstance(d, DeclareLegalSymbol)]
        assert activations == sorted(result.activated)
        assert declarations_ == sorted(result.vocabulary)
