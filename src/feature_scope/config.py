"""Constants and runtime configuration for feature-scope.

Manifest keys and the symbol prefix are fixed by the on-disk format and the
attribute macros that consume the emitted symbols. ``ScopeConfig`` gathers
the few values that may be overridden from the process environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

MANIFEST_FILENAME = "Cargo.toml"
BUILD_SCRIPT_FILENAME = "build.rs"

# [package.metadata.<DECL_KEY>] and [[package.metadata.<REFS_KEY>]]
DECL_KEY = "feature-scope-decl"
REFS_KEY = "feature-scope"

DEFAULT_FEATURE = "default"
SCOPE_PREFIX = "__scope_"

RUSTFLAGS_ENV = "RUSTFLAGS"
CARGO_ENV = "CARGO"
PREFIX_ENV = "FEATURE_SCOPE_PREFIX"
MANIFEST_DIR_ENV = "CARGO_MANIFEST_DIR"


@dataclass(frozen=True)
class ScopeConfig:
    """Runtime settings for one invocation.

    Attributes:
        cargo: Cargo executable to run. Cargo exports ``CARGO`` to the
            subcommands it spawns, so ``cargo feature-scope`` reuses the
            same toolchain.
        scope_prefix: Prefix prepended to capability names to form
            compilation symbols.
        rustflags: ``RUSTFLAGS`` value already present in the environment.
    """

    cargo: str = "cargo"
    scope_prefix: str = SCOPE_PREFIX
    rustflags: str = ""

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ScopeConfig:
        """Build a config from *env* (defaults to ``os.environ``)."""
        source = os.environ if env is None else env
        return cls(
            cargo=source.get(CARGO_ENV) or "cargo",
            scope_prefix=source.get(PREFIX_ENV) or SCOPE_PREFIX,
            rustflags=source.get(RUSTFLAGS_ENV, ""),
        )
