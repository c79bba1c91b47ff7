"""Tests for cycle-safe transitive expansion."""

from __future__ import annotations

from feature_scope.core.manifest import FeatureTable
from feature_scope.core.resolver import expand


class TestExpand:
    """Tests for ``expand``."""

    def test_leaf(self) -> None:
        assert expand("a", FeatureTable({"a": []})) == {"a"}

    def test_chain(self) -> None:
        table = FeatureTable({"a": ["b"], "b": ["c"], "c": []})
        assert expand("a", table) == {"a", "b", "c"}

    def test_two_cycle_terminates(self) -> None:
        table = FeatureTable({"a": ["b"], "b": ["a"]})
        assert expand("a", table) == {"a", "b"}

    def test_self_loop(self) -> None:
        assert expand("a", FeatureTable({"a": ["a"]})) == {"a"}

    def test_diamond(self) -> None:
        table = FeatureTable({"top": ["l", "r"], "l": ["base"], "r": ["base"], "base": []})
        assert expand("top", table) == {"top", "l", "r", "base"}

    def test_dangling_implication_is_leaf(self) -> None:
        assert expand("a", FeatureTable({"a": ["ghost"]})) == {"a", "ghost"}

    def test_root_absent_from_table(self) -> None:
        assert expand("missing", FeatureTable()) == {"missing"}

    def test_default_expansion(self) -> None:
        table = FeatureTable({"default": ["x"], "x": ["y"], "y": []})
        assert expand("default", table) == {"default", "x", "y"}

    def test_long_chain(self) -> None:
        n = 5000
        table = {f"f{i}": [f"f{i + 1}"] for i in range(n)}
        assert len(expand("f0", table)) == n + 1

    def test_plain_mapping(self) -> None:
        assert expand("a", {"a": ["b"]}) == {"a", "b"}
