"""Renderers from directives to the formats cargo and rustc understand.

Two channels exist. ``RUSTFLAGS`` carries ``--cfg`` / ``--check-cfg``
arguments to every rustc invocation of a cargo command; a build script
instead prints ``cargo:rustc-cfg=`` / ``cargo:rustc-check-cfg=`` lines that
cargo applies to the package being built.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from feature_scope.config import BUILD_SCRIPT_FILENAME, MANIFEST_FILENAME
from feature_scope.core.emission.directives import ActivateSymbol, DeclareLegalSymbol, Directive
from feature_scope.core.resolver import ResolutionResult


def _check_cfg(symbol: str) -> str:
    return f"cfg({symbol})"


def cfg_args(directives: Iterable[Directive]) -> list[str]:
    """``--cfg SYMBOL`` pairs for every activation."""
    args: list[str] = []
    for directive in directives:
        if isinstance(directive, ActivateSymbol):
            args.extend(["--cfg", directive.symbol])
    return args


def check_cfg_args(directives: Iterable[Directive]) -> list[str]:
    """``--check-cfg cfg(SYMBOL)`` pairs for every declaration."""
    args: list[str] = []
    for directive in directives:
        if isinstance(directive, DeclareLegalSymbol):
            args.extend(["--check-cfg", _check_cfg(directive.symbol)])
    return args


def to_rustc_args(directives: Sequence[Directive]) -> list[str]:
    """All rustc arguments: activations first, then declarations."""
    return cfg_args(directives) + check_cfg_args(directives)


def merge_rustflags(existing: str, directives: Sequence[Directive]) -> str:
    """Append the directive flags to an existing ``RUSTFLAGS`` value."""
    parts = [existing] if existing else []
    parts.extend(to_rustc_args(directives))
    return " ".join(parts)


def to_build_script_lines(
    directives: Iterable[Directive],
    rerun_if_changed: Sequence[str] = (BUILD_SCRIPT_FILENAME, MANIFEST_FILENAME),
) -> list[str]:
    """Lines a build script prints to apply the directives."""
    lines = [f"cargo:rerun-if-changed={path}" for path in rerun_if_changed]
    for directive in directives:
        if isinstance(directive, ActivateSymbol):
            lines.append(f"cargo:rustc-cfg={directive.symbol}")
        else:
            lines.append(f"cargo:rustc-check-cfg={_check_cfg(directive.symbol)}")
    return lines


def to_dict(result: ResolutionResult, directives: Sequence[Directive]) -> dict[str, Any]:
    """JSON-serializable view of a resolution and its directives."""
    return {
        "package": result.target,
        "activated": sorted(result.activated),
        "vocabulary": sorted(result.vocabulary),
        "cfg": [d.symbol for d in directives if isinstance(d, ActivateSymbol)],
        "check_cfg": [_check_cfg(d.symbol) for d in directives if isinstance(d, DeclareLegalSymbol)],
        "diagnostics": [d.to_dict() for d in result.diagnostics],
    }
