"""Workspace topology discovery.

Submodules
----------
- ``models``: WorkspaceTopology.
- ``discovery``: root descriptor lookup and member expansion.
- ``selection``: default target package choice.
"""

from feature_scope.core.workspace.discovery import (
    discover,
    expand_member_pattern,
    find_manifest,
    find_root_manifest,
    load_topology,
    standalone_topology,
)
from feature_scope.core.workspace.models import WorkspaceTopology
from feature_scope.core.workspace.selection import select_target

__all__ = [
    "WorkspaceTopology",
    "discover",
    "expand_member_pattern",
    "find_manifest",
    "find_root_manifest",
    "load_topology",
    "select_target",
    "standalone_topology",
]
