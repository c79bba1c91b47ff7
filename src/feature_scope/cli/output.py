"""Rich output formatting helpers for the feature-scope CLI."""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from feature_scope.core.resolver import ResolutionResult
from feature_scope.core.workspace import WorkspaceTopology

console = Console()
err_console = Console(stderr=True)


def print_resolution(result: ResolutionResult, prefix: str) -> None:
    """Print one package's features as an active/inactive table.

    Args:
        result: Resolution of a single package.
        prefix: Symbol prefix used to show the emitted cfg name.
    """
    table = Table(title=f"Scope features: {result.target}", show_header=True, header_style="bold")
    table.add_column("Feature", style="bold")
    table.add_column("Symbol", style="dim")
    table.add_column("Status", justify="center")

    for name in sorted(result.vocabulary):
        if name in result.activated:
            status = Text("ACTIVE", style="bold green")
        else:
            status = Text("inactive", style="dim")
        table.add_row(name, f"{prefix}{name}", status)

    console.print(table)
    console.print(
        f"[bold]{len(result.activated)}[/bold] active | "
        f"{len(result.vocabulary)} legal | "
        f"[yellow]{len(result.diagnostics)} warnings[/yellow]"
    )


def print_topology(topology: WorkspaceTopology) -> None:
    """Print a one-line header describing the discovered workspace."""
    mode = "standalone package" if topology.standalone else "workspace"
    console.print(
        Panel(
            f"[bold]{mode}[/bold] at {topology.root} "
            f"({len(topology.members)} package{'s' if len(topology.members) != 1 else ''})",
            title="feature-scope",
        )
    )


def print_command(argv: Sequence[str], rustc_args: Sequence[str]) -> None:
    """Show the cargo command about to run, on stderr."""
    err_console.print(
        f"[bold]Running:[/bold] {escape(shlex.join(argv))}", highlight=False, soft_wrap=True
    )
    if rustc_args:
        err_console.print(
            f"[dim]RUSTFLAGS += {escape(' '.join(rustc_args))}[/dim]",
            highlight=False,
            soft_wrap=True,
        )
