"""Shimscan core package."""
from .clock import utc_now_iso
from .context import RunContext
from .errors import ShimRegistryError, ShimScanError
from .logging import log_event

__all__ = [
    "RunContext",
    "ShimRegistryError",
    "ShimScanError",
    "log_event",
    "utc_now_iso",
]
