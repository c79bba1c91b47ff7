"""Shared test helpers for writing Cargo manifests and workspaces to disk."""

from __future__ import annotations

import json
from pathlib import Path


def _toml_list(items: list[str]) -> str:
    return "[" + ", ".join(json.dumps(i) for i in items) + "]"


def manifest_text(
    name: str,
    decl: dict[str, list[str]] | None = None,
    refs: list[dict] | None = None,
) -> str:
    """Render a package Cargo.toml with optional feature-scope metadata.

    Each entry of *refs* is a dict with ``package``, ``features`` and an
    optional ``default_features`` bool.
    """
    lines = [
        "[package]",
        f"name = {json.dumps(name)}",
        'version = "0.1.0"',
        'edition = "2021"',
        "",
    ]
    if decl is not None:
        lines.append("[package.metadata.feature-scope-decl]")
        for key, implied in decl.items():
            lines.append(f"{json.dumps(key)} = {_toml_list(implied)}")
        lines.append("")
    for ref in refs or []:
        lines.append("[[package.metadata.feature-scope]]")
        lines.append(f"package = {json.dumps(ref['package'])}")
        lines.append(f"features = {_toml_list(ref.get('features', []))}")
        if "default_features" in ref:
            lines.append(f"default-features = {'true' if ref['default_features'] else 'false'}")
        lines.append("")
    return "\n".join(lines)


def write_package(
    directory: Path,
    name: str,
    decl: dict[str, list[str]] | None = None,
    refs: list[dict] | None = None,
) -> Path:
    """Create *directory*/Cargo.toml for a package and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest = directory / "Cargo.toml"
    manifest.write_text(manifest_text(name, decl, refs))
    return manifest


def write_workspace(
    root: Path,
    members: list[str],
    default_members: list[str] | None = None,
) -> Path:
    """Create a virtual workspace root Cargo.toml and return its path."""
    root.mkdir(parents=True, exist_ok=True)
    lines = ["[workspace]", f"members = {_toml_list(members)}"]
    if default_members is not None:
        lines.append(f"default-members = {_toml_list(default_members)}")
    manifest = root / "Cargo.toml"
    manifest.write_text("\n".join(lines) + "\n")
    return manifest
