"""Host interpreter discovery."""

from .discovery import Capabilities, discover

__all__ = ["Capabilities", "discover"]
