"""Choice of the package to resolve when ``-p`` is not given."""

from __future__ import annotations

from feature_scope.core.workspace.discovery import expand_member_pattern
from feature_scope.core.workspace.models import WorkspaceTopology
from feature_scope.exceptions import WorkspaceError


def select_target(topology: WorkspaceTopology, explicit: str | None = None) -> str:
    """Return the name of the package to resolve.

    An explicit package always wins. In a workspace the first
    ``default-members`` entry is used, then the first ``members`` entry,
    then the root package itself. A standalone topology has exactly one
    package.

    Raises:
        WorkspaceError: If the workspace has no usable member.
    """
    if explicit:
        return explicit

    if topology.standalone:
        return next(iter(topology.members))

    for patterns in (topology.default_member_patterns, topology.member_patterns):
        if patterns:
            return _package_for_pattern(topology, patterns[0])

    root_node = topology.package_at(topology.root)
    if root_node is not None:
        return root_node.name
    raise WorkspaceError("No members found in workspace", topology.root_manifest)


def _package_for_pattern(topology: WorkspaceTopology, pattern: str) -> str:
    for member_dir in expand_member_pattern(topology.root, pattern):
        node = topology.package_at(member_dir)
        if node is not None:
            return node.name
    raise WorkspaceError(
        f"No parseable package found for workspace member {pattern!r}",
        topology.root_manifest,
    )
