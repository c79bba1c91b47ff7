"""Directive model: the resolver's output as a list of symbol instructions.

``ActivateSymbol`` turns a compilation symbol on; ``DeclareLegalSymbol``
registers it with the compiler's cfg checker so that an inactive but known
symbol is not reported as a typo.
"""

from __future__ import annotations

from dataclasses import dataclass

from feature_scope.config import SCOPE_PREFIX
from feature_scope.core.resolver import ResolutionResult


@dataclass(frozen=True)
class ActivateSymbol:
    """Enable the symbol for ``name`` in this compilation."""

    name: str
    prefix: str = SCOPE_PREFIX

    @property
    def symbol(self) -> str:
        return f"{self.prefix}{self.name}"


@dataclass(frozen=True)
class DeclareLegalSymbol:
    """Declare the symbol for ``name`` as part of the legal vocabulary."""

    name: str
    prefix: str = SCOPE_PREFIX

    @property
    def symbol(self) -> str:
        return f"{self.prefix}{self.name}"


Directive = ActivateSymbol | DeclareLegalSymbol


def emit(result: ResolutionResult, prefix: str = SCOPE_PREFIX) -> list[Directive]:
    """Turn a resolution result into an ordered directive list.

    All activations come first, then all declarations, each sorted by
    feature name so the output is stable across runs.
    """
    directives: list[Directive] = [
        ActivateSymbol(name, prefix) for name in sorted(result.activated)
    ]
    directives.extend(DeclareLegalSymbol(name, prefix) for name in sorted(result.vocabulary))
    return directives
