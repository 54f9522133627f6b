from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from .clock import build_run_id
from .config import load_config_file
from .env import getenv, getenv_flag
from .errors import ShimScanError
from .exit_codes import ERR_CONFIG

OutputFormat = Literal["text", "json"]

DEFAULT_POSIX_SHELL = "C:/Program Files/Git/bin/bash.exe"


def default_shims_dir() -> Path:
    scoop_root = getenv("SCOOP")
    base = Path(scoop_root) if scoop_root else Path.home() / "scoop"
    return base / "shims"


def parse_families(raw: str | list[str] | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    items = raw.split(",") if isinstance(raw, str) else [str(item) for item in raw]
    return tuple(item.strip() for item in items if item.strip())


def _resolve_path(value: str | None, fallback: Path | None = None) -> Path | None:
    if value:
        return Path(value).expanduser().resolve()
    return fallback.resolve() if fallback is not None else None


def _pick(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _flag(cli_value: bool, env_name: str, file_value: Any) -> bool:
    if cli_value:
        return True
    try:
        env_value = getenv_flag(env_name)
    except ValueError as exc:
        raise ShimScanError(str(exc), ERR_CONFIG, kind="invalid_env") from exc
    if env_value is not None:
        return env_value
    return bool(file_value) if file_value is not None else False


@dataclass(frozen=True)
class RunContext:
    run_id: str
    root: Path | None
    out_dir: Path
    shims_dir: Path
    families: tuple[str, ...]
    include_version: bool
    dry_run: bool
    posix_shell: Path
    output_format: OutputFormat = "text"
    verbose: bool = False
    quiet: bool = False
    log_json: bool = False
    config_path: Path | None = None

    @property
    def state_file(self) -> Path:
        return self.out_dir / "shims.txt"

    @property
    def map_file(self) -> Path:
        return self.out_dir / "shims-map.csv"

    @property
    def report_file(self) -> Path:
        return self.out_dir / "shims-report.json"

    def require_root(self) -> Path:
        if self.root is None:
            raise ShimScanError("no scan root configured; pass --root or set SHIMSCAN_ROOT", ERR_CONFIG, kind="missing_root")
        if not self.root.is_dir():
            raise ShimScanError(f"scan root does not exist: {self.root}", ERR_CONFIG, kind="missing_root")
        return self.root

    @classmethod
    def from_args(
        cls,
        *,
        root: str | None = None,
        out_dir: str | None = None,
        shims_dir: str | None = None,
        families: str | None = None,
        include_version: bool = False,
        dry_run: bool = False,
        posix_shell: str | None = None,
        config: str | None = None,
        run_id: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        config_path = _resolve_path(_pick(config, getenv("SHIMSCAN_CONFIG")))
        file_cfg: dict[str, Any] = load_config_file(config_path) if config_path is not None else {}
        resolved_root = _resolve_path(_pick(root, getenv("SHIMSCAN_ROOT"), file_cfg.get("root")))
        resolved_out = _resolve_path(
            _pick(out_dir, getenv("SHIMSCAN_OUT_DIR"), file_cfg.get("out_dir")),
            Path(os.getcwd()).resolve(),
        )
        resolved_shims = _resolve_path(
            _pick(shims_dir, getenv("SHIMSCAN_SHIMS_DIR"), file_cfg.get("shims_dir")),
            default_shims_dir(),
        )
        resolved_shell = _pick(posix_shell, getenv("SHIMSCAN_POSIX_SHELL"), file_cfg.get("posix_shell"), DEFAULT_POSIX_SHELL)
        return cls(
            run_id=run_id or getenv("RUN_ID") or build_run_id(),
            root=resolved_root,
            out_dir=resolved_out,  # type: ignore[arg-type]
            shims_dir=resolved_shims,  # type: ignore[arg-type]
            families=parse_families(_pick(families, getenv("SHIMSCAN_FAMILIES"), file_cfg.get("families"))),
            include_version=_flag(include_version, "SHIMSCAN_INCLUDE_VERSION", file_cfg.get("include_version")),
            dry_run=_flag(dry_run, "SHIMSCAN_DRY_RUN", file_cfg.get("dry_run")),
            posix_shell=Path(str(resolved_shell)),
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or bool(file_cfg.get("log_json", False)),
            config_path=config_path,
        )
