from __future__ import annotations

import json
from pathlib import Path

from ..core.context import RunContext
from ..scan.models import ScanSummary

REPORT_SCHEMA = "shimscan.scan-report.v1"


def build_report(ctx: RunContext, summary: ScanSummary) -> dict[str, object]:
    return {
        "schema_name": REPORT_SCHEMA,
        "schema_version": 1,
        "tool": "shimscan",
        "status": "ok" if summary.ok else "error",
        "run_id": ctx.run_id,
        "root": str(ctx.root or ""),
        "dry_run": ctx.dry_run,
        "families": list(ctx.families),
        "include_version": ctx.include_version,
        "counts": summary.counts(),
        "shims": list(summary.emitted),
        "failures": [failure.to_dict() for failure in summary.failures],
    }


def write_report(ctx: RunContext, payload: dict[str, object]) -> Path:
    target = ctx.report_file
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return target
