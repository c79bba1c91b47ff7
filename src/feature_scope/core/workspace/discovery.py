"""Workspace topology discovery.

Locates the root Cargo.toml by walking up from a start directory, expands
``[workspace].members`` (literal paths and single-segment globs such as
``crates/*``) and parses every member into a name -> ``PackageNode`` index.

Discovery Algorithm:
    1. Walk from the start directory towards the filesystem root and stop
       at the first directory containing a Cargo.toml.
    2. If that manifest is a package without a ``[workspace]`` section,
       keep walking up to the first ancestor declaring workspace members.
       The package belongs to that workspace only if one of its member
       patterns expands to the package directory; otherwise it is
       resolved standalone.
    3. Expand each member pattern to candidate directories.
    4. Parse each candidate. A member with a malformed manifest is left out
       of the index instead of aborting discovery, since it may be unrelated
       to the package being built.
"""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import Any

from feature_scope.config import MANIFEST_FILENAME
from feature_scope.core.manifest import PackageNode, load_toml, node_from_data, parse_manifest
from feature_scope.core.workspace.models import WorkspaceTopology
from feature_scope.exceptions import MalformedManifestError, ManifestNotFoundError

logger = logging.getLogger(__name__)

_GLOB_CHARS = ("*", "?", "[")


def find_manifest(start: Path) -> Path | None:
    """Return the nearest Cargo.toml at or above *start*, or None."""
    current = start.resolve()
    while True:
        candidate = current / MANIFEST_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def find_root_manifest(start: Path) -> Path:
    """Like ``find_manifest`` but raises when nothing is found.

    Raises:
        ManifestNotFoundError: If no Cargo.toml exists at or above *start*.
    """
    manifest = find_manifest(start)
    if manifest is None:
        raise ManifestNotFoundError(
            f"Could not find {MANIFEST_FILENAME} in {start} or any parent directory"
        )
    return manifest


def discover(start: Path) -> WorkspaceTopology | None:
    """Discover the workspace enclosing *start*.

    If the nearest manifest declares no workspace members, its ancestors
    are searched for a workspace root whose members include the package
    at that manifest, which is where cargo runs build scripts from.

    Args:
        start: Directory to begin the upward search from.

    Returns:
        The workspace topology, or None when no manifest is found or no
        enclosing workspace lists the nearest package (standalone mode).

    Raises:
        MalformedManifestError: If the root descriptor is not valid TOML.
    """
    manifest = find_manifest(start)
    if manifest is None:
        logger.debug("No %s above %s", MANIFEST_FILENAME, start)
        return None
    data = load_toml(manifest)
    if _declares_members(data):
        return topology_from_data(data, manifest)
    if isinstance(data.get("workspace"), dict):
        logger.debug("%s is a workspace root with no members", manifest)
        return None
    logger.debug("%s declares no workspace members", manifest)
    return _enclosing_workspace(manifest)


def _enclosing_workspace(manifest: Path) -> WorkspaceTopology | None:
    """Topology of the nearest ancestor workspace listing *manifest*'s package."""
    package_dir = manifest.parent
    for directory in package_dir.parents:
        candidate = directory / MANIFEST_FILENAME
        if not candidate.is_file():
            continue
        try:
            data = load_toml(candidate)
        except MalformedManifestError as exc:
            logger.debug("Ignoring unreadable ancestor manifest %s: %s", candidate, exc)
            continue
        if not _declares_members(data):
            continue
        patterns = _string_list(data["workspace"].get("members"), "workspace.members", candidate)
        for pattern in patterns:
            for member_dir in expand_member_pattern(directory, pattern):
                if member_dir.resolve() == package_dir:
                    return topology_from_data(data, candidate)
        logger.debug("%s is not a member of the workspace at %s", package_dir, candidate)
        return None
    return None


def _declares_members(data: dict[str, Any]) -> bool:
    workspace = data.get("workspace")
    return isinstance(workspace, dict) and "members" in workspace


def topology_from_data(data: dict[str, Any], manifest: Path) -> WorkspaceTopology:
    """Build a topology from a decoded root descriptor that has a workspace."""
    root = manifest.parent
    workspace = data["workspace"]
    patterns = _string_list(workspace.get("members"), "workspace.members", manifest)
    default_patterns = _string_list(
        workspace.get("default-members"), "workspace.default-members", manifest
    )

    members: dict[str, PackageNode] = {}
    if isinstance(data.get("package"), dict):
        try:
            _add_member(members, node_from_data(data, manifest))
        except MalformedManifestError as exc:
            logger.debug("Skipping root package at %s: %s", root, exc)

    for pattern in patterns:
        for member_dir in expand_member_pattern(root, pattern):
            member_manifest = member_dir / MANIFEST_FILENAME
            try:
                node = parse_manifest(member_manifest)
            except MalformedManifestError as exc:
                logger.debug("Skipping workspace member %s: %s", member_dir, exc)
                continue
            _add_member(members, node)

    logger.debug("Discovered %d workspace members under %s", len(members), root)
    return WorkspaceTopology(
        root=root,
        members=members,
        member_patterns=tuple(patterns),
        default_member_patterns=tuple(default_patterns),
    )


def expand_member_pattern(root: Path, pattern: str) -> list[Path]:
    """Expand one ``[workspace].members`` entry to member directories.

    Literal paths are returned as-is if they are directories. Patterns with
    glob characters in their final segment list the parent directory and
    keep matching children that contain a Cargo.toml, sorted by name.
    """
    if not any(ch in pattern for ch in _GLOB_CHARS):
        member = root / pattern
        return [member] if member.is_dir() else []

    pattern_path = root / pattern
    parent = pattern_path.parent
    if not parent.is_dir():
        return []
    matched: list[Path] = []
    for child in sorted(parent.iterdir()):
        if not child.is_dir() or not fnmatch.fnmatchcase(child.name, pattern_path.name):
            continue
        if (child / MANIFEST_FILENAME).is_file():
            matched.append(child)
    return matched


def standalone_topology(manifest: Path) -> WorkspaceTopology:
    """Topology containing exactly the package at *manifest*.

    Raises:
        MalformedManifestError: If the manifest cannot be parsed.
    """
    node = parse_manifest(manifest)
    return WorkspaceTopology(
        root=manifest.parent,
        members={node.name: node},
        standalone=True,
    )


def load_topology(start: Path) -> WorkspaceTopology:
    """Return the workspace around *start*, or a standalone topology.

    Raises:
        ManifestNotFoundError: If no Cargo.toml exists at or above *start*.
        MalformedManifestError: If the root descriptor is malformed, or in
            standalone mode the package manifest lacks an identity.
    """
    topology = discover(start)
    if topology is not None:
        return topology
    return standalone_topology(find_root_manifest(start))


def _add_member(members: dict[str, PackageNode], node: PackageNode) -> None:
    existing = members.get(node.name)
    if existing is not None:
        logger.debug(
            "Duplicate package %r at %s; keeping %s",
            node.name, node.manifest_path, existing.manifest_path,
        )
        return
    members[node.name] = node


def _string_list(value: Any, key: str, manifest: Path) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedManifestError(f"{key} must be an array of strings", manifest)
    return list(value)
