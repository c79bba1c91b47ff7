"""Manifest model and parser.

Submodules
----------
- ``models``: FeatureTable, FeatureReference, PackageNode.
- ``parser``: Cargo.toml reading and validation.

All public names are re-exported here::

    from feature_scope.core.manifest import PackageNode, parse_manifest
"""

from feature_scope.core.manifest.models import FeatureReference, FeatureTable, PackageNode
from feature_scope.core.manifest.parser import (
    load_toml,
    node_from_data,
    parse_manifest,
    parse_manifest_text,
)

__all__ = [
    "FeatureReference",
    "FeatureTable",
    "PackageNode",
    "load_toml",
    "node_from_data",
    "parse_manifest",
    "parse_manifest_text",
]
