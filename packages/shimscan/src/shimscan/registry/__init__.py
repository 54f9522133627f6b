"""Shim registry adapters."""

from .scoop import ScoopShimRegistry, ShimRegistry

__all__ = ["ScoopShimRegistry", "ShimRegistry"]
