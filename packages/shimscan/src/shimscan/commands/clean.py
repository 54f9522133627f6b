"""Remove the shims a previous real scan recorded in ``shims.txt``."""

from __future__ import annotations

from ..audit.sink import read_state
from ..cli.output import build_base_payload, emit
from ..core.context import RunContext
from ..core.errors import ShimRegistryError
from ..core.exit_codes import ERR_REGISTRY
from ..core.logging import log_event
from ..registry.scoop import ScoopShimRegistry, ShimRegistry


def run_clean_command(ctx: RunContext, as_json: bool, registry: ShimRegistry | None = None) -> int:
    registry = registry if registry is not None else ScoopShimRegistry(ctx)
    removed: list[str] = []
    missing: list[str] = []
    failures: list[dict[str, str]] = []
    for name in read_state(ctx.state_file):
        if not registry.exists(name):
            missing.append(name)
            log_event(ctx, "warn", "clean", "missing", shim=name)
            continue
        if ctx.dry_run:
            removed.append(name)
            continue
        try:
            registry.remove(name)
        except ShimRegistryError as exc:
            failures.append({"shim": name, "message": exc.message})
            log_event(ctx, "error", "clean", "remove-failed", shim=name, error=exc.message)
            continue
        removed.append(name)
        log_event(ctx, "info", "clean", "removed", shim=name)

    if not ctx.dry_run and not failures:
        ctx.state_file.unlink(missing_ok=True)

    payload = build_base_payload(ctx, status="ok" if not failures else "error")
    payload.update({"dry_run": ctx.dry_run, "removed": removed, "missing": missing, "failures": failures})
    if as_json:
        emit(payload, as_json=True)
    else:
        verb = "would remove" if ctx.dry_run else "removed"
        print(f"clean {payload['status']}: {verb} {len(removed)}, missing {len(missing)}, failed {len(failures)}")
    return 0 if not failures else ERR_REGISTRY
