"""Workspace topology model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from feature_scope.config import MANIFEST_FILENAME
from feature_scope.core.manifest.models import PackageNode


@dataclass(frozen=True)
class WorkspaceTopology:
    """The packages visible to one resolution run.

    Attributes:
        root: Directory holding the root descriptor (or the standalone
            package's manifest).
        members: Package name -> parsed node. Members whose manifest failed
            to parse are absent.
        member_patterns: ``[workspace].members`` as written.
        default_member_patterns: ``[workspace].default-members`` as written.
        standalone: True when no workspace encloses the package and
            ``members`` holds exactly that package.
    """

    root: Path
    members: dict[str, PackageNode] = field(default_factory=dict)
    member_patterns: tuple[str, ...] = ()
    default_member_patterns: tuple[str, ...] = ()
    standalone: bool = False

    @property
    def root_manifest(self) -> Path:
        return self.root / MANIFEST_FILENAME

    def get(self, name: str) -> PackageNode | None:
        return self.members.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def package_at(self, directory: Path) -> PackageNode | None:
        """Return the member whose manifest lives in *directory*, if any."""
        target = directory.resolve()
        for node in self.members.values():
            if node.root.resolve() == target:
                return node
        return None
