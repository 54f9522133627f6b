from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

Which = Callable[[str], "str | None"]
IsFile = Callable[[Path], bool]

POWERSHELL_HOSTS = ("pwsh", "powershell")
PYTHON_LAUNCHERS = ("py", "python")
SECONDARY_SHELL = "wsl"


@dataclass(frozen=True)
class Interpreter:
    label: str
    path: Path


@dataclass(frozen=True)
class Capabilities:
    """Interpreters available on the host, resolved once per run."""

    powershell: Interpreter | None
    python: Interpreter | None
    posix_shell: Interpreter | None
    secondary_shell: Interpreter | None

    def to_dict(self) -> dict[str, dict[str, str] | None]:
        def _row(entry: Interpreter | None) -> dict[str, str] | None:
            return None if entry is None else {"label": entry.label, "path": str(entry.path)}

        return {
            "powershell": _row(self.powershell),
            "python": _row(self.python),
            "posix_shell": _row(self.posix_shell),
            "secondary_shell": _row(self.secondary_shell),
        }


def _first_on_path(names: tuple[str, ...], which: Which) -> Interpreter | None:
    for name in names:
        found = which(name)
        if found:
            return Interpreter(label=name, path=Path(found))
    return None


def _fixed_path(label: str, path: Path, is_file: IsFile) -> Interpreter | None:
    try:
        present = is_file(path)
    except OSError:
        present = False
    return Interpreter(label=label, path=path) if present else None


def discover(
    posix_shell_path: Path,
    which: Which = shutil.which,
    is_file: IsFile = Path.is_file,
) -> Capabilities:
    return Capabilities(
        powershell=_first_on_path(POWERSHELL_HOSTS, which),
        python=_first_on_path(PYTHON_LAUNCHERS, which),
        posix_shell=_fixed_path("bash", posix_shell_path, is_file),
        secondary_shell=_first_on_path((SECONDARY_SHELL,), which),
    )
