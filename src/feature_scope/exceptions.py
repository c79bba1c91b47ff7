"""feature-scope exception hierarchy.

All public exceptions inherit from FeatureScopeError, giving callers a single
base class to catch when they want to handle any feature-scope failure
without swallowing unrelated errors. Every exception that concerns a
specific manifest carries its path so the CLI can report it.
"""

from __future__ import annotations

from pathlib import Path


class FeatureScopeError(Exception):
    """Base exception for all feature-scope errors."""

    def __init__(self, message: str, manifest_path: Path | None = None) -> None:
        super().__init__(message)
        self.manifest_path = manifest_path

    def __str__(self) -> str:
        message = super().__str__()
        if self.manifest_path is not None:
            return f"{message} ({self.manifest_path})"
        return message


class MalformedManifestError(FeatureScopeError):
    """Raised when a Cargo.toml cannot be read or has an unexpected shape.

    Covers TOML syntax errors, a missing ``[package]`` identity, a
    ``feature-scope-decl`` table that is not string -> array of strings,
    and ``feature-scope`` reference entries missing required fields.
    """


class ManifestNotFoundError(FeatureScopeError):
    """Raised when no Cargo.toml exists in the start directory or its parents."""


class PackageNotFoundError(FeatureScopeError):
    """Raised when the package under resolution is absent from the workspace."""


class WorkspaceError(FeatureScopeError):
    """Raised for workspace-level failures.

    Covers workspaces with no members to pick a default target from and
    member directories whose manifest cannot provide a package name.
    """


class CargoInvocationError(FeatureScopeError):
    """Raised when the cargo executable cannot be started."""
