"""Cargo.toml parser for feature-scope metadata.

Reads the package identity and the two metadata sections used by
feature-scope::

    [package.metadata.feature-scope-decl]
    default = ["a"]
    a = []
    b = ["a"]

    [[package.metadata.feature-scope]]
    package = "producer"
    features = ["b"]
    default-features = false

The parser is a pure function of the file contents. Any structural problem
raises ``MalformedManifestError`` carrying the manifest path; whether that is
fatal is the caller's decision.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from feature_scope.config import DECL_KEY, REFS_KEY
from feature_scope.core.manifest.models import FeatureReference, FeatureTable, PackageNode
from feature_scope.exceptions import MalformedManifestError


def load_toml(manifest_path: Path) -> dict[str, Any]:
    """Read and decode any Cargo.toml, including virtual workspace manifests.

    Raises:
        MalformedManifestError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedManifestError(f"Failed to read manifest: {exc}", manifest_path) from exc
    return _decode(text, manifest_path)


def parse_manifest(manifest_path: Path) -> PackageNode:
    """Parse the Cargo.toml at *manifest_path* into a ``PackageNode``.

    Args:
        manifest_path: Path to a package manifest.

    Returns:
        The parsed package node.

    Raises:
        MalformedManifestError: On unreadable files, invalid TOML, a missing
            package name, or malformed feature-scope metadata.
    """
    return node_from_data(load_toml(manifest_path), manifest_path)


def parse_manifest_text(text: str, manifest_path: Path) -> PackageNode:
    """Parse manifest *text* as if it had been read from *manifest_path*."""
    return node_from_data(_decode(text, manifest_path), manifest_path)


def node_from_data(data: dict[str, Any], manifest_path: Path) -> PackageNode:
    """Build a ``PackageNode`` from an already-decoded manifest."""
    package = data.get("package")
    if not isinstance(package, dict):
        raise MalformedManifestError("No [package] section in manifest", manifest_path)
    name = package.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedManifestError("package.name must be a non-empty string", manifest_path)

    metadata = package.get("metadata")
    if metadata is not None and not isinstance(metadata, dict):
        raise MalformedManifestError("package.metadata must be a table", manifest_path)

    return PackageNode(
        name=name,
        manifest_path=manifest_path,
        features=_parse_decl(metadata, manifest_path),
        references=_parse_refs(metadata, manifest_path),
    )


def _decode(text: str, manifest_path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise MalformedManifestError(f"Failed to parse TOML: {exc}", manifest_path) from exc


def _parse_decl(metadata: dict[str, Any] | None, manifest_path: Path) -> FeatureTable | None:
    """Parse ``package.metadata.feature-scope-decl``; None if absent."""
    if not metadata or DECL_KEY not in metadata:
        return None

    decl = metadata[DECL_KEY]
    if not isinstance(decl, dict):
        raise MalformedManifestError(f"metadata.{DECL_KEY} must be a table", manifest_path)

    features: dict[str, list[str]] = {}
    for key, value in decl.items():
        if not isinstance(value, list):
            raise MalformedManifestError(
                f"Feature {key!r} in {DECL_KEY} must be an array", manifest_path
            )
        for i, item in enumerate(value):
            if not isinstance(item, str):
                raise MalformedManifestError(
                    f"Feature {key!r} item {i} in {DECL_KEY} must be a string", manifest_path
                )
        features[key] = list(value)

    return FeatureTable(features)


def _parse_refs(metadata: dict[str, Any] | None, manifest_path: Path) -> tuple[FeatureReference, ...]:
    """Parse ``[[package.metadata.feature-scope]]`` entries in order."""
    if not metadata or REFS_KEY not in metadata:
        return ()

    entries = metadata[REFS_KEY]
    if not isinstance(entries, list):
        raise MalformedManifestError(f"metadata.{REFS_KEY} must be an array", manifest_path)

    return tuple(_parse_ref(entry, i, manifest_path) for i, entry in enumerate(entries))


def _parse_ref(entry: Any, index: int, manifest_path: Path) -> FeatureReference:
    where = f"{REFS_KEY} reference at index {index}"
    if not isinstance(entry, dict):
        raise MalformedManifestError(f"{where} must be a table", manifest_path)

    package = entry.get("package")
    if not isinstance(package, str) or not package:
        raise MalformedManifestError(f"{where} is missing 'package'", manifest_path)

    if "features" not in entry:
        raise MalformedManifestError(f"{where} is missing 'features'", manifest_path)
    features = entry["features"]
    if not isinstance(features, list) or not all(isinstance(f, str) for f in features):
        raise MalformedManifestError(f"{where}: 'features' must be an array of strings", manifest_path)

    default_features = entry.get("default-features", True)
    if not isinstance(default_features, bool):
        raise MalformedManifestError(f"{where}: 'default-features' must be a boolean", manifest_path)

    return FeatureReference(
        package=package,
        features=tuple(dict.fromkeys(features)),
        default_features=default_features,
    )
