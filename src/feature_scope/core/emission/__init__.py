"""Symbol emission.

Submodules
----------
- ``directives``: ActivateSymbol, DeclareLegalSymbol and ``emit``.
- ``renderers``: rustc arguments, RUSTFLAGS, build-script lines, JSON.
"""

from feature_scope.core.emission.directives import (
    ActivateSymbol,
    DeclareLegalSymbol,
    Directive,
    emit,
)
from feature_scope.core.emission.renderers import (
    cfg_args,
    check_cfg_args,
    merge_rustflags,
    to_build_script_lines,
    to_dict,
    to_rustc_args,
)

__all__ = [
    "ActivateSymbol",
    "DeclareLegalSymbol",
    "Directive",
    "cfg_args",
    "check_cfg_args",
    "emit",
    "merge_rustflags",
    "to_build_script_lines",
    "to_dict",
    "to_rustc_args",
]
