"""Feature dependency resolver.

Submodules
----------
- ``expansion``: cycle-safe transitive closure over a declaration table.
- ``diagnostics``: recoverable cross-reference problems.
- ``engine``: FeatureResolver and ResolutionResult.

All public names are re-exported here::

    from feature_scope.core.resolver import FeatureResolver, resolve
"""

from feature_scope.core.resolver.diagnostics import Diagnostic, DiagnosticKind
from feature_scope.core.resolver.engine import (
    FeatureResolver,
    ResolutionResult,
    resolve,
)
from feature_scope.core.resolver.expansion import expand

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "FeatureResolver",
    "ResolutionResult",
    "expand",
    "resolve",
]
