"""feature-scope CLI - per-package scope features for Cargo workspaces.

Entry point for the ``cargo-feature-scope`` executable. Cargo runs it as
``cargo-feature-scope feature-scope ...`` when the user types
``cargo feature-scope ...``, so the cargo wrapper is registered as the
``feature-scope`` subcommand.

Commands:
    feature-scope - Run a cargo command with resolved scope features.
    resolve       - Show resolved scope features for one or all packages.
    emit          - Print directives for a build script or RUSTFLAGS.

Usage::

    cargo feature-scope build
    cargo feature-scope run -p your-package-name
    cargo feature-scope test --release
    cargo-feature-scope resolve --all
    cargo-feature-scope emit --format rustflags
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from feature_scope import __version__
from feature_scope.cli.emit_cmd import emit_command
from feature_scope.cli.output import err_console
from feature_scope.cli.resolve_cmd import resolve_command
from feature_scope.cli.run_cmd import run_command


def configure_logging(verbose: bool) -> None:
    """Route ``feature_scope`` log records to stderr through Rich."""
    logger = logging.getLogger("feature_scope")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log discovery and resolution details.")
def cli(verbose: bool) -> None:
    """feature-scope: independent scope features for each workspace crate.

    Producers declare features in [package.metadata.feature-scope-decl];
    consumers request them with [[package.metadata.feature-scope]]. The
    resolved features reach rustc as --cfg __scope_<name> flags.
    """
    configure_logging(verbose)


cli.add_command(run_command)
cli.add_command(resolve_command)
cli.add_command(emit_command)
