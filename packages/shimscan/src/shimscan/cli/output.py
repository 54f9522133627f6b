"""CLI payload output helpers."""

from __future__ import annotations

import json


def emit(payload: dict[str, object], as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, sort_keys=True))
    else:
        print(json.dumps(payload, indent=2, sort_keys=True))


def build_base_payload(ctx, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "shimscan",
        "status": status,
        "run_id": ctx.run_id,
        "format": ctx.output_format,
    }


def resolve_output_format(*, cli_json: bool, cli_format: str | None) -> str:
    if cli_json:
        return "json"
    return cli_format or "text"


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return json.dumps(
            {
                "schema_name": "shimscan.error.v1",
                "schema_version": 1,
                "tool": "shimscan",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            sort_keys=True,
        )
    return f"shimscan: {message}"
