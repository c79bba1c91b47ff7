"""Cross-reference diagnostics produced while resolving.

Every condition here is recoverable: the offending reference (or requested
capability) contributes nothing to the result, and resolution carries on
with the remaining references. Diagnostics are collected in the order they
occur and reported once resolution has finished.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DiagnosticKind(Enum):
    """The recoverable cross-reference problems."""

    REFERENCED_PACKAGE_NOT_FOUND = "referenced_package_not_found"
    REFERENCED_PACKAGE_HAS_NO_DECLARATIONS = "referenced_package_has_no_declarations"
    UNKNOWN_CAPABILITY = "unknown_capability"


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable problem found in a consumer's references.

    Attributes:
        kind: What went wrong.
        package: The consumer package whose reference is at fault.
        producer: The referenced producer package.
        manifest_path: Manifest of the consumer.
        capability: The requested capability, for ``UNKNOWN_CAPABILITY``.
    """

    kind: DiagnosticKind
    package: str
    producer: str
    manifest_path: Path
    capability: str | None = None

    @property
    def message(self) -> str:
        if self.kind is DiagnosticKind.REFERENCED_PACKAGE_NOT_FOUND:
            return f"dependency package {self.producer!r} not found in workspace"
        if self.kind is DiagnosticKind.REFERENCED_PACKAGE_HAS_NO_DECLARATIONS:
            return f"package {self.producer!r} does not have feature-scope-decl"
        return f"feature {self.capability!r} not declared in package {self.producer!r}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "package": self.package,
            "producer": self.producer,
            "capability": self.capability,
            "manifest_path": str(self.manifest_path),
            "message": self.message,
        }


def package_not_found(package: str, producer: str, manifest_path: Path) -> Diagnostic:
    return Diagnostic(DiagnosticKind.REFERENCED_PACKAGE_NOT_FOUND, package, producer, manifest_path)


def no_declarations(package: str, producer: str, manifest_path: Path) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.REFERENCED_PACKAGE_HAS_NO_DECLARATIONS, package, producer, manifest_path
    )


def unknown_capability(
    package: str, producer: str, capability: str, manifest_path: Path
) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.UNKNOWN_CAPABILITY, package, producer, manifest_path, capability
    )
