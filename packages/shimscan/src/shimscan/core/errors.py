from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ShimScanError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class ShimRegistryError(ShimScanError):
    """Raised when the external shim registry rejects or cannot run a call."""
