"""``feature-scope resolve`` - Show resolved scope features.

Exit Codes:
    0 - Resolution completed (warnings may have been printed).
    1 - Discovery or resolution failed.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from feature_scope.cli.output import print_resolution, print_topology
from feature_scope.cli.session import fail, open_session, report_diagnostics
from feature_scope.core.emission import emit, to_dict
from feature_scope.core.resolver import FeatureResolver
from feature_scope.exceptions import FeatureScopeError


@click.command("resolve")
@click.option("--package", "-p", default=None, metavar="PACKAGE", help="Package to resolve.")
@click.option("--all", "resolve_all", is_flag=True, help="Resolve every workspace member.")
@click.option(
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory to start workspace discovery from (default: current).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def resolve_command(
    package: str | None,
    resolve_all: bool,
    directory: Path,
    output_format: str,
) -> None:
    """Show which scope features are active for a package.

    Without --package the workspace's default member is resolved.
    """
    try:
        session = open_session(directory, package)
        if resolve_all:
            results = FeatureResolver(session.topology).resolve_all()
        else:
            results = [session.result]
    except FeatureScopeError as exc:
        fail(exc)
        return

    prefix = session.config.scope_prefix
    for result in results:
        report_diagnostics(result)

    if output_format == "json":
        payload = [to_dict(r, emit(r, prefix)) for r in results]
        click.echo(json.dumps(payload if resolve_all else payload[0], indent=2))
    else:
        print_topology(session.topology)
        for result in results:
            print_resolution(result, prefix)
    sys.exit(0)
