from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    return utc_now().isoformat().replace("+00:00", "Z")


def build_run_id(prefix: str = "shimscan") -> str:
    return f"{prefix}-{utc_now().strftime('%Y%m%d-%H%M%S')}"
