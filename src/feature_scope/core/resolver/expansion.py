"""Transitive expansion of a capability under its "implies" relation.

Declaration tables may contain cycles (``a = ["b"]``, ``b = ["a"]``); the
visited set terminates the walk instead of reporting them. Names missing
from the table are leaves.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def expand(root: str, table: Mapping[str, Sequence[str]]) -> frozenset[str]:
    """Return *root* plus every capability it implies, directly or transitively.

    Uses an explicit stack so long implication chains do not depend on the
    interpreter recursion limit.

    Args:
        root: Capability to start from. It is included even when absent
            from *table*.
        table: Capability name -> implied names.

    Returns:
        The closure of *root*.
    """
    visited: set[str] = set()
    stack = [root]
    while stack:
        name = stack.pop()
        if name in visited:
            continue
        visited.add(name)
        stack.extend(reversed(table.get(name, ())))
    return frozenset(visited)
