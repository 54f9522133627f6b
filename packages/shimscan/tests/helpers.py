from __future__ import annotations

import csv
import dataclasses
from pathlib import Path
from typing import Sequence

from shimscan.core.context import RunContext
from shimscan.core.errors import ShimRegistryError
from shimscan.core.exit_codes import ERR_REGISTRY
from shimscan.interpreters.discovery import Capabilities, Interpreter

NO_INTERPRETERS = Capabilities(powershell=None, python=None, posix_shell=None, secondary_shell=None)
ALL_INTERPRETERS = Capabilities(
    powershell=Interpreter("pwsh", Path("/opt/pwsh/pwsh")),
    python=Interpreter("py", Path("/opt/py/py")),
    posix_shell=Interpreter("bash", Path("/opt/git/bin/bash")),
    secondary_shell=Interpreter("wsl", Path("/opt/wsl/wsl")),
)


class FakeRegistry:
    """In-memory stand-in for ``scoop shim`` that materializes ``<name>.exe``."""

    def __init__(self, shims_dir: Path, fail: Sequence[str] = ()) -> None:
        self._shims_dir = shims_dir
        self._shims_dir.mkdir(parents=True, exist_ok=True)
        self._fail = set(fail)
        self.added: list[tuple[str, Path, tuple[str, ...]]] = []
        self.removed: list[str] = []

    def shims_directory(self) -> Path:
        return self._shims_dir

    def exists(self, name: str) -> bool:
        return (self._shims_dir / f"{name}.exe").exists()

    def add(self, name: str, target: Path, args: Sequence[str] = ()) -> None:
        if name in self._fail:
            raise ShimRegistryError(f"registry rejected {name}", ERR_REGISTRY, kind="registry_call_failed")
        self.added.append((name, target, tuple(args)))
        (self._shims_dir / f"{name}.exe").write_text("", encoding="utf-8")

    def remove(self, name: str) -> None:
        if name in self._fail:
            raise ShimRegistryError(f"registry rejected {name}", ERR_REGISTRY, kind="registry_call_failed")
        self.removed.append(name)
        (self._shims_dir / f"{name}.exe").unlink()


def make_ctx(tmp_path: Path, **overrides: object) -> RunContext:
    ctx = RunContext(
        run_id="t-run",
        root=tmp_path / "root",
        out_dir=tmp_path / "out",
        shims_dir=tmp_path / "shims",
        families=(),
        include_version=False,
        dry_run=False,
        posix_shell=tmp_path / "no-such-bash",
    )
    ctx = dataclasses.replace(ctx, **overrides)
    assert ctx.root is not None
    ctx.root.mkdir(parents=True, exist_ok=True)
    ctx.shims_dir.mkdir(parents=True, exist_ok=True)
    return ctx


def touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def read_map(path: Path) -> list[dict[str, str]]:
    with path.open(encoding="utf-8", newline="") as handle:
        return list(csv.DictReader(handle))
