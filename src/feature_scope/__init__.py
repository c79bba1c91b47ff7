"""feature-scope: per-package scoped feature flags for Cargo workspaces."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
