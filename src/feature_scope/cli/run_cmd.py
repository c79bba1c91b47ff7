"""``cargo feature-scope <COMMAND> [-p PACKAGE] [ARGS...]`` - Run cargo with scope features.

Resolves the scope features of the target package, appends the resulting
``--cfg`` / ``--check-cfg`` flags to ``RUSTFLAGS`` and runs the cargo
command. Every argument not recognised here is forwarded to cargo.

Exit Codes:
    Cargo's exit code on completion.
    1 - Discovery or resolution failed, or cargo could not be started.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from feature_scope.cli.output import print_command
from feature_scope.cli.session import fail, open_session, report_diagnostics
from feature_scope.core.emission import to_rustc_args
from feature_scope.exceptions import FeatureScopeError
from feature_scope.runner import build_cargo_command, build_environment, run_cargo


@click.command(
    "feature-scope",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("command")
@click.option("--package", "-p", default=None, metavar="PACKAGE", help="Package to build.")
@click.option(
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory to start workspace discovery from (default: current).",
)
@click.option("--print-only", is_flag=True, help="Print the cargo command without running it.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def run_command(
    command: str,
    package: str | None,
    directory: Path,
    print_only: bool,
    args: tuple[str, ...],
) -> None:
    """Run a cargo COMMAND (build, check, run, test, ...) with scope features.

    Additional ARGS are passed to cargo unchanged.
    """
    try:
        session = open_session(directory, package)
    except FeatureScopeError as exc:
        fail(exc)
        return

    report_diagnostics(session.result)
    argv = build_cargo_command(session.config, command, package, args)
    print_command(argv, to_rustc_args(session.directives))
    if print_only:
        sys.exit(0)

    env = build_environment(session.config, session.directives)
    try:
        code = run_cargo(argv, env)
    except FeatureScopeError as exc:
        fail(exc)
        return
    sys.exit(code)
