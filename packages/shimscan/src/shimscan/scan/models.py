from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

SCRIPT_EXTENSIONS = (".ps1", ".py", ".cmd", ".bat", ".sh", ".zsh")

CSV_HEADER = ("shim", "type", "family", "app", "tool", "leaf", "ext", "version", "interpreter", "target", "isDryRun")


@dataclass(frozen=True)
class ScriptFile:
    path: Path

    @property
    def leaf(self) -> str:
        return self.path.stem

    @property
    def ext(self) -> str:
        return self.path.suffix.lower()


@dataclass(frozen=True)
class ShimRecord:
    shim: str
    family: str
    app: str
    tool: str | None
    leaf: str
    ext: str
    version: str
    interpreter: str
    target: Path
    dry_run: bool
    kind: str = "root"

    def csv_row(self) -> list[str]:
        return [
            self.shim,
            self.kind,
            self.family,
            self.app,
            self.tool or "",
            self.leaf,
            self.ext,
            self.version,
            self.interpreter,
            str(self.target),
            str(self.dry_run),
        ]


@dataclass(frozen=True)
class ShimFailure:
    shim: str
    target: Path
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"shim": self.shim, "target": str(self.target), "message": self.message}


@dataclass
class ScanSummary:
    families: int = 0
    apps: int = 0
    scripts: int = 0
    skipped: int = 0
    emitted: list[str] = field(default_factory=list)
    failures: list[ShimFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def counts(self) -> dict[str, int]:
        return {
            "families": self.families,
            "apps": self.apps,
            "scripts": self.scripts,
            "emitted": len(self.emitted),
            "skipped": self.skipped,
            "failed": len(self.failures),
        }
