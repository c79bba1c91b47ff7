"""``feature-scope emit`` - Print scope-feature directives.

Meant to be called from a package's ``build.rs``, which echoes the output
so cargo applies the ``cargo:rustc-cfg`` lines to that package::

    let out = Command::new("cargo-feature-scope").arg("emit").output()?;
    print!("{}", String::from_utf8(out.stdout)?);

Exit Codes:
    0 - Directives printed.
    1 - Discovery or resolution failed.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from feature_scope.cli.session import fail, open_session, report_diagnostics
from feature_scope.config import MANIFEST_DIR_ENV
from feature_scope.core.emission import to_build_script_lines, to_dict, to_rustc_args
from feature_scope.exceptions import FeatureScopeError


@click.command("emit")
@click.option("--package", "-p", default=None, metavar="PACKAGE", help="Package to resolve.")
@click.option(
    "--manifest-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help=f"Package directory (default: ${MANIFEST_DIR_ENV} or the current directory).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["cargo", "rustflags", "json"]),
    default="cargo",
    help="cargo: build-script lines; rustflags: rustc arguments; json.",
)
def emit_command(package: str | None, manifest_dir: Path | None, output_format: str) -> None:
    """Print the directives for a package's resolved scope features."""
    if manifest_dir is None:
        manifest_dir = Path(os.environ.get(MANIFEST_DIR_ENV) or ".")
    try:
        session = open_session(manifest_dir, package, prefer_directory_package=True)
    except FeatureScopeError as exc:
        fail(exc)
        return

    report_diagnostics(session.result)
    if output_format == "json":
        click.echo(json.dumps(to_dict(session.result, session.directives), indent=2))
    elif output_format == "rustflags":
        click.echo(" ".join(to_rustc_args(session.directives)))
    else:
        for line in to_build_script_lines(session.directives):
            click.echo(line)
    sys.exit(0)
