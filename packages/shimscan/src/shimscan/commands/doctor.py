from __future__ import annotations

import shutil
from typing import Callable

from ..cli.output import build_base_payload, emit
from ..core.context import RunContext
from ..core.exit_codes import ERR_GENERIC
from ..interpreters.discovery import discover
from ..registry.scoop import ScoopShimRegistry


def run_doctor(ctx: RunContext, as_json: bool, which: Callable[[str], "str | None"] = shutil.which) -> int:
    caps = discover(ctx.posix_shell, which=which)
    registry = ScoopShimRegistry(ctx, which=which)
    scoop = registry.locate()
    payload = build_base_payload(ctx, status="ok" if scoop else "error")
    payload.update(
        {
            "registry": {
                "tool": "scoop",
                "path": scoop or "",
                "shims_dir": str(registry.shims_directory()),
                "shims_dir_exists": registry.shims_directory().is_dir(),
            },
            "interpreters": caps.to_dict(),
        }
    )
    if as_json:
        emit(payload, as_json=True)
    else:
        print(f"doctor: {payload['status']}")
        print(f"- scoop: {scoop or 'missing'} (shims: {ctx.shims_dir})")
        for key, row in caps.to_dict().items():
            print(f"- {key}: {row['label'] + ' ' + row['path'] if row else 'missing'}")
    return 0 if scoop else ERR_GENERIC
