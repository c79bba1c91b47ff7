"""Cargo invocation with resolved scope features.

The resolved flags reach rustc through ``RUSTFLAGS``: any value already set
in the environment is kept and the ``--cfg`` / ``--check-cfg`` arguments are
appended to it. The caller's environment is never modified; the child gets
a copy.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence

from feature_scope.config import RUSTFLAGS_ENV, ScopeConfig
from feature_scope.core.emission import Directive, merge_rustflags
from feature_scope.exceptions import CargoInvocationError

logger = logging.getLogger(__name__)


def build_cargo_command(
    config: ScopeConfig,
    command: str,
    package: str | None = None,
    args: Sequence[str] = (),
) -> list[str]:
    """Return ``cargo COMMAND [-p PACKAGE] ARGS...``."""
    argv = [config.cargo, command]
    if package:
        argv.extend(["-p", package])
    argv.extend(args)
    return argv


def build_environment(
    config: ScopeConfig,
    directives: Sequence[Directive],
    base_env: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Copy of *base_env* (default ``os.environ``) with merged ``RUSTFLAGS``."""
    env = dict(os.environ if base_env is None else base_env)
    if directives:
        env[RUSTFLAGS_ENV] = merge_rustflags(config.rustflags, directives)
    return env


def run_cargo(argv: Sequence[str], env: Mapping[str, str]) -> int:
    """Run cargo and return its exit code.

    Raises:
        CargoInvocationError: If the executable cannot be started.
    """
    logger.debug("Running %s with %s=%r", argv, RUSTFLAGS_ENV, env.get(RUSTFLAGS_ENV, ""))
    try:
        completed = subprocess.run(list(argv), env=dict(env), check=False)
    except OSError as exc:
        raise CargoInvocationError(f"Failed to execute {argv[0]}: {exc}") from exc
    return completed.returncode
