"""Script classification: which interpreter runs a script and how.

Each supported extension maps to one strategy that builds the registry
invocation from the run's interpreter capabilities. Extensions outside
``SCRIPT_EXTENSIONS`` never reach this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from ..interpreters.discovery import Capabilities

DIRECT = "direct"


class ScriptKind(Enum):
    POWERSHELL = ".ps1"
    PYTHON = ".py"
    CMD = ".cmd"
    BATCH = ".bat"
    SHELL = ".sh"
    ZSH = ".zsh"


@dataclass(frozen=True)
class Invocation:
    interpreter: str
    executable: Path
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class Skip:
    reason: str


Outcome = Invocation | Skip


def posix_path(path: Path) -> str:
    return str(path).replace("\\", "/")


def _shell_wrap(path: Path) -> str:
    return f'"{posix_path(path)}" "$@"'


def _direct(path: Path) -> Invocation:
    return Invocation(interpreter=DIRECT, executable=path)


def _powershell(path: Path, caps: Capabilities) -> Outcome:
    host = caps.powershell
    if host is None:
        return _direct(path)
    return Invocation(host.label, host.path, ("-NoProfile", "-ExecutionPolicy", "Bypass", "-File", str(path)))


def _python(path: Path, caps: Capabilities) -> Outcome:
    py = caps.python
    if py is None:
        return _direct(path)
    if py.label == "py":
        return Invocation(py.label, py.path, ("-3", str(path)))
    return Invocation(py.label, py.path, (str(path),))


def _batch(path: Path, _caps: Capabilities) -> Outcome:
    return _direct(path)


def _shell(path: Path, caps: Capabilities) -> Outcome:
    if caps.posix_shell is not None:
        return Invocation(caps.posix_shell.label, caps.posix_shell.path, ("-c", _shell_wrap(path), "_"))
    if caps.secondary_shell is not None:
        return Invocation(caps.secondary_shell.label, caps.secondary_shell.path, ("bash", "-c", _shell_wrap(path), "_"))
    return Skip("no POSIX shell backend (bash or wsl) available")


def _zsh(path: Path, caps: Capabilities) -> Outcome:
    if caps.secondary_shell is None:
        return Skip("zsh scripts need wsl, which is not available")
    return Invocation(caps.secondary_shell.label, caps.secondary_shell.path, ("zsh", "-lc", _shell_wrap(path), "_"))


_STRATEGIES: dict[ScriptKind, Callable[[Path, Capabilities], Outcome]] = {
    ScriptKind.POWERSHELL: _powershell,
    ScriptKind.PYTHON: _python,
    ScriptKind.CMD: _batch,
    ScriptKind.BATCH: _batch,
    ScriptKind.SHELL: _shell,
    ScriptKind.ZSH: _zsh,
}


def classify(path: Path, caps: Capabilities) -> Outcome:
    kind = ScriptKind(path.suffix.lower())
    return _STRATEGIES[kind](path, caps)
