"""Shared plumbing for the CLI commands: discovery, target choice, resolution."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from feature_scope.config import ScopeConfig
from feature_scope.core.emission import Directive, emit
from feature_scope.core.resolver import FeatureResolver, ResolutionResult
from feature_scope.core.workspace import WorkspaceTopology, load_topology, select_target
from feature_scope.exceptions import FeatureScopeError


@dataclass
class Session:
    """Everything one command needs after resolution."""

    config: ScopeConfig
    topology: WorkspaceTopology
    result: ResolutionResult
    directives: list[Directive]


def open_session(
    directory: Path,
    package: str | None,
    *,
    prefer_directory_package: bool = False,
) -> Session:
    """Discover the workspace around *directory* and resolve the target.

    Args:
        directory: Where discovery starts.
        package: Explicit ``-p`` selection, if any.
        prefer_directory_package: When no package is given, resolve the
            package whose manifest is in *directory* (build-script mode)
            before falling back to the workspace default.

    Raises:
        FeatureScopeError: On any fatal discovery or resolution failure.
    """
    config = ScopeConfig.from_env()
    topology = load_topology(directory)
    target = package
    if target is None and prefer_directory_package:
        node = topology.package_at(directory)
        target = node.name if node is not None else None
    target = select_target(topology, target)
    result = FeatureResolver(topology).resolve(target)
    return Session(
        config=config,
        topology=topology,
        result=result,
        directives=emit(result, config.scope_prefix),
    )


def report_diagnostics(result: ResolutionResult) -> None:
    """Print one warning line per recoverable problem, on stderr."""
    for item in result.diagnostics:
        click.secho(f"Warning: {item.message} (referenced by {item.package})", fg="yellow", err=True)


def fail(exc: FeatureScopeError) -> None:
    """Report a fatal error and exit with status 1."""
    click.secho(f"Error: {exc}", fg="red", err=True)
    sys.exit(1)
