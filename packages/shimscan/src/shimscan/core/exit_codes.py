"""Process exit codes shared by every shimscan command."""

from __future__ import annotations

ERR_GENERIC = 1
ERR_CONFIG = 2
ERR_REGISTRY = 3
ERR_VALIDATION = 4
ERR_INTERNAL = 70

__all__ = ["ERR_GENERIC", "ERR_CONFIG", "ERR_REGISTRY", "ERR_VALIDATION", "ERR_INTERNAL"]
