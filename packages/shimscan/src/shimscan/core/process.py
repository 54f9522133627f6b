from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .logging import log_event

if TYPE_CHECKING:
    from .context import RunContext


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: str
    stderr: str
    duration_ms: int

    @property
    def combined_output(self) -> str:
        return (self.stdout + self.stderr).strip()


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    ctx: RunContext | None = None,
) -> CommandResult:
    """Run ``cmd`` once and capture its output.

    No retries and no timeout: registry calls are synchronous and a failure is
    reported to the caller as a non-zero ``code``. A missing executable maps to
    code 127 the way a shell would report it.
    """
    started = time.monotonic()
    try:
        proc = subprocess.run(cmd, cwd=cwd, text=True, capture_output=True, check=False)
        result = CommandResult(
            code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    except OSError as exc:
        result = CommandResult(
            code=127,
            stdout="",
            stderr=f"{cmd[0]}: {exc}",
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    if ctx is not None:
        log_event(
            ctx,
            "debug",
            "process",
            "run-command",
            command=" ".join(cmd),
            code=result.code,
            duration_ms=result.duration_ms,
        )
    return result
