"""Shared fixtures for feature-scope tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_package, write_workspace


@pytest.fixture
def basic_workspace(tmp_path: Path) -> Path:
    """A workspace with one producer and one consumer.

    ``lib`` declares ``default = []``, ``a = []`` and ``b = ["a"]``;
    ``app`` requests ``b`` from ``lib``.
    """
    write_workspace(tmp_path, ["crates/*"], default_members=["crates/app"])
    write_package(
        tmp_path / "crates" / "lib",
        "lib",
        decl={"default": [], "a": [], "b": ["a"]},
    )
    write_package(
        tmp_path / "crates" / "app",
        "app",
        refs=[{"package": "lib", "features": ["b"]}],
    )
    return tmp_path


@pytest.fixture
def standalone_package(tmp_path: Path) -> Path:
    """A single package outside any workspace with ``default = ["x"]``."""
    write_package(tmp_path / "solo", "solo", decl={"default": ["x"], "x": ["y"], "y": []})
    return tmp_path / "solo"
