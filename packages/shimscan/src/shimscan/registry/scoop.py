from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Protocol, Sequence

from ..core.context import RunContext
from ..core.errors import ShimRegistryError
from ..core.exit_codes import ERR_REGISTRY
from ..core.process import CommandResult, run_command


class ShimRegistry(Protocol):
    def shims_directory(self) -> Path: ...

    def exists(self, name: str) -> bool: ...

    def add(self, name: str, target: Path, args: Sequence[str] = ()) -> None: ...

    def remove(self, name: str) -> None: ...


class ScoopShimRegistry:
    """Registers shims through the ``scoop shim`` subcommand.

    Existence is checked through ``<name>.exe`` in the shims directory, which is
    what ``scoop shim add`` creates.
    """

    def __init__(
        self,
        ctx: RunContext,
        which: Callable[[str], "str | None"] = shutil.which,
        runner: Callable[..., CommandResult] = run_command,
    ) -> None:
        self._ctx = ctx
        self._shims_dir = ctx.shims_dir
        self._which = which
        self._runner = runner

    def shims_directory(self) -> Path:
        return self._shims_dir

    def exists(self, name: str) -> bool:
        return (self._shims_dir / f"{name}.exe").exists()

    def locate(self) -> str | None:
        return self._which("scoop")

    def _scoop(self) -> str:
        found = self.locate()
        if not found:
            raise ShimRegistryError("scoop executable not found on PATH", ERR_REGISTRY, kind="registry_unavailable")
        return found

    def _call(self, *argv: str) -> None:
        cmd = [self._scoop(), "shim", *argv]
        result = self._runner(cmd, ctx=self._ctx)
        if result.code != 0:
            detail = result.combined_output or f"exit code {result.code}"
            raise ShimRegistryError(f"`scoop shim {argv[0]} {argv[1]}` failed: {detail}", ERR_REGISTRY, kind="registry_call_failed")

    def add(self, name: str, target: Path, args: Sequence[str] = ()) -> None:
        # scoop parses dash-prefixed words as its own options unless they follow `--`
        extra = ("--", *args) if args else ()
        self._call("add", name, str(target), *extra)

    def remove(self, name: str) -> None:
        self._call("rm", name)
