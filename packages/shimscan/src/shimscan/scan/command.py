from __future__ import annotations

from ..audit.report import build_report, write_report
from ..audit.sink import AuditSink
from ..cli.output import emit
from ..core.context import RunContext
from ..core.exit_codes import ERR_REGISTRY
from ..core.logging import log_event
from ..interpreters.discovery import Capabilities, discover
from ..registry.scoop import ScoopShimRegistry, ShimRegistry
from .emitter import ShimEmitter
from .models import ScanSummary
from .walker import walk


def run_scan(ctx: RunContext, registry: ShimRegistry | None = None, caps: Capabilities | None = None) -> ScanSummary:
    root = ctx.require_root()
    caps = caps if caps is not None else discover(ctx.posix_shell)
    registry = registry if registry is not None else ScoopShimRegistry(ctx)
    log_event(
        ctx,
        "info",
        "scan",
        "start",
        root=str(root),
        dry_run=ctx.dry_run,
        families=",".join(ctx.families) or "*",
        include_version=ctx.include_version,
        config=str(ctx.config_path) if ctx.config_path is not None else "-",
    )
    log_event(ctx, "debug", "scan", "capabilities", **{k: (v or {}).get("path", "-") for k, v in caps.to_dict().items()})
    sink = AuditSink(ctx.state_file, ctx.map_file, ctx.dry_run)
    sink.reset()
    summary = walk(root, ctx.families, ShimEmitter(ctx, caps, registry, sink))
    log_event(ctx, "info", "scan", "done", **summary.counts())
    return summary


def run_scan_command(ctx: RunContext, as_json: bool, registry: ShimRegistry | None = None) -> int:
    summary = run_scan(ctx, registry=registry)
    payload = build_report(ctx, summary)
    write_report(ctx, payload)
    if as_json:
        emit(payload, as_json=True)
    else:
        mode = "planned" if ctx.dry_run else "registered"
        counts = summary.counts()
        print(f"scan {payload['status']}: {counts['emitted']} shims {mode}, {counts['skipped']} skipped, {counts['failed']} failed")
        print(f"map: {ctx.map_file}")
        if not ctx.dry_run:
            print(f"state: {ctx.state_file}")
        for failure in summary.failures:
            print(f"- failed {failure.shim}: {failure.message}")
    return 0 if summary.ok else ERR_REGISTRY
