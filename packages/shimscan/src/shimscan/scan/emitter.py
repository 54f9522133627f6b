from __future__ import annotations

from ..audit.sink import AuditSink
from ..core.context import RunContext
from ..core.errors import ShimRegistryError
from ..core.logging import log_event
from ..interpreters.discovery import Capabilities
from ..registry.scoop import ShimRegistry
from .classify import Skip, classify
from .models import ScanSummary, ScriptFile, ShimFailure, ShimRecord
from .naming import base_name, uniquify


class ShimEmitter:
    """Turns discovered scripts into registered shims and audit rows."""

    def __init__(
        self,
        ctx: RunContext,
        caps: Capabilities,
        registry: ShimRegistry,
        sink: AuditSink,
        summary: ScanSummary | None = None,
    ) -> None:
        self._ctx = ctx
        self._caps = caps
        self._registry = registry
        self._sink = sink
        self.summary = summary if summary is not None else ScanSummary()
        self._claimed: set[str] = set()

    @property
    def ctx(self) -> RunContext:
        return self._ctx

    def _taken(self, name: str) -> bool:
        # names planned earlier in this run count as taken, dry-run included
        return name in self._claimed or self._registry.exists(name)

    def emit(self, script: ScriptFile, family: str, app: str, tool: str | None, version: str) -> ShimRecord | None:
        self.summary.scripts += 1
        outcome = classify(script.path, self._caps)
        if isinstance(outcome, Skip):
            self.summary.skipped += 1
            log_event(self._ctx, "warn", "emitter", "skip", script=str(script.path), reason=outcome.reason)
            return None

        name = uniquify(base_name(family, app, tool, script.leaf, version, self._ctx.include_version), self._taken)
        record = ShimRecord(
            shim=name,
            family=family,
            app=app,
            tool=tool,
            leaf=script.leaf,
            ext=script.ext,
            version=version,
            interpreter=outcome.interpreter,
            target=script.path,
            dry_run=self._ctx.dry_run,
        )
        if not self._ctx.dry_run:
            try:
                self._registry.add(name, outcome.executable, outcome.args)
            except ShimRegistryError as exc:
                # the attempt still gets its map row and keeps its name unique in the map
                self._claimed.add(name)
                self._sink.record_row(record)
                self.summary.failures.append(ShimFailure(shim=name, target=script.path, message=exc.message))
                log_event(self._ctx, "error", "emitter", "register-failed", shim=name, script=str(script.path), error=exc.message)
                return None

        self._claimed.add(name)
        self._sink.record(record)
        self.summary.emitted.append(name)
        log_event(
            self._ctx,
            "info",
            "emitter",
            "planned" if self._ctx.dry_run else "registered",
            shim=name,
            interpreter=outcome.interpreter,
            script=str(script.path),
        )
        return record
