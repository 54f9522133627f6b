from __future__ import annotations

import csv
from pathlib import Path

from ..scan.models import CSV_HEADER, ShimRecord


class AuditSink:
    """Append-only writer for ``shims.txt`` and ``shims-map.csv``.

    The state list only ever receives real installs; the CSV map receives one
    row per emitted record in both real and dry-run mode.
    """

    def __init__(self, state_file: Path, map_file: Path, dry_run: bool) -> None:
        self.state_file = state_file
        self.map_file = map_file
        self.dry_run = dry_run

    def reset(self) -> None:
        for path in (self.state_file, self.map_file):
            path.unlink(missing_ok=True)
        self.map_file.parent.mkdir(parents=True, exist_ok=True)
        with self.map_file.open("w", encoding="utf-8", newline="") as handle:
            csv.writer(handle).writerow(CSV_HEADER)

    def record_state(self, shim_name: str) -> None:
        if self.dry_run:
            return
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        with self.state_file.open("a", encoding="utf-8") as handle:
            handle.write(shim_name + "\n")

    def record_row(self, record: ShimRecord) -> None:
        with self.map_file.open("a", encoding="utf-8", newline="") as handle:
            csv.writer(handle).writerow(record.csv_row())

    def record(self, record: ShimRecord) -> None:
        self.record_state(record.shim)
        self.record_row(record)


def read_state(state_file: Path) -> list[str]:
    if not state_file.is_file():
        return []
    return [line.strip() for line in state_file.read_text(encoding="utf-8").splitlines() if line.strip()]
