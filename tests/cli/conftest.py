"""Shared fixtures for CLI tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import write_package


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's cargo environment out of the tests."""
    for name in ("RUSTFLAGS", "CARGO", "FEATURE_SCOPE_PREFIX", "CARGO_MANIFEST_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cargo_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[list[str], dict[str, str]]]:
    """Replace ``subprocess.run`` and record every cargo invocation."""
    calls: list[tuple[list[str], dict[str, str]]] = []

    def fake_run(argv, env, check):  # noqa: ANN001
        calls.append((argv, env))
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


@pytest.fixture
def warning_workspace(basic_workspace: Path) -> Path:
    """``basic_workspace`` plus a consumer with a broken reference."""
    write_package(
        basic_workspace / "crates" / "sloppy",
        "sloppy",
        refs=[
            {"package": "lib", "features": ["nope", "a"]},
            {"package": "ghost", "features": ["x"]},
        ],
    )
    return basic_workspace
