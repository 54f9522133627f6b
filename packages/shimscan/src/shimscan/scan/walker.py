from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, TypeVar

from ..core.context import RunContext
from ..core.logging import log_event
from .emitter import ShimEmitter
from .models import SCRIPT_EXTENSIONS, ScanSummary, ScriptFile
from .version import resolve_version

CURRENT = "current"
PLUGINS = "plugins"

T = TypeVar("T")


def _subdirs(path: Path) -> list[Path]:
    return [child for child in path.iterdir() if child.is_dir()]


def _is_script(path: Path) -> bool:
    return path.suffix.lower() in SCRIPT_EXTENSIONS and path.is_file()


def root_scripts(current: Path) -> list[ScriptFile]:
    return [ScriptFile(p) for p in current.iterdir() if _is_script(p)]


def tool_scripts(tool_dir: Path) -> list[ScriptFile]:
    return [ScriptFile(p) for p in tool_dir.rglob("*") if _is_script(p)]


def _listing(ctx: RunContext, lister: Callable[[Path], list[T]], path: Path) -> list[T]:
    """List ``path``; an unreadable directory is warned about and treated as empty."""
    try:
        return lister(path)
    except OSError as exc:
        log_event(ctx, "warn", "walker", "unreadable", path=str(path), error=exc.strerror or str(exc))
        return []


def walk(root: Path, family_filter: Sequence[str], emitter: ShimEmitter) -> ScanSummary:
    """Emit shims for every script under ``root/<family>/<app>/current``.

    Root-level scripts of ``current`` are attributed to the app; scripts under
    ``current/plugins/<tool>`` (recursive) are attributed to the tool.
    """
    ctx = emitter.ctx
    allowed = set(family_filter)
    summary = emitter.summary
    for family_dir in _listing(ctx, _subdirs, root):
        family = family_dir.name
        if allowed and family not in allowed:
            continue
        summary.families += 1
        for app_dir in _listing(ctx, _subdirs, family_dir):
            current = app_dir / CURRENT
            if not current.is_dir():
                continue
            summary.apps += 1
            app = app_dir.name
            version = resolve_version(current)
            for script in _listing(ctx, root_scripts, current):
                emitter.emit(script, family, app, None, version)
            plugins = current / PLUGINS
            if not plugins.is_dir():
                continue
            for tool_dir in _listing(ctx, _subdirs, plugins):
                for script in _listing(ctx, tool_scripts, tool_dir):
                    emitter.emit(script, family, app, tool_dir.name, version)
    return summary
