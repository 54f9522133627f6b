from __future__ import annotations

import os
from pathlib import Path, PureWindowsPath


def _is_junction(path: Path) -> bool:
    is_junction = getattr(path, "is_junction", None)
    if is_junction is None:
        return False
    return bool(is_junction())


def resolve_version(current: Path) -> str:
    """Return the version a ``current`` pointer links to, or ``""``.

    ``current -> 3.2.1`` yields ``"3.2.1"``. A plain directory, a missing entry
    or any lookup failure yields the empty string.
    """
    try:
        if not (current.is_symlink() or _is_junction(current)):
            return ""
        target = os.readlink(current).rstrip("/\\")
    except (OSError, ValueError):
        return ""
    # junction targets are Windows paths regardless of the host path flavour
    return PureWindowsPath(target).name if "\\" in target else Path(target).name
