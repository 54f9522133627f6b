from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from ...core.errors import ShimScanError
from ...core.exit_codes import ERR_VALIDATION

SCHEMAS_PACKAGE = "shimscan.contracts.schema.schemas"


def schemas_root() -> Path:
    return Path(str(resources.files(SCHEMAS_PACKAGE)))


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


def catalog_path() -> Path:
    return schemas_root() / "catalog.json"


def load_catalog() -> dict[str, CatalogEntry]:
    raw = json.loads(catalog_path().read_text(encoding="utf-8"))
    entries: dict[str, CatalogEntry] = {}
    for row in raw.get("schemas", []):
        name = str(row.get("name", "")).strip()
        file_name = str(row.get("file", "")).strip()
        if not name or not file_name:
            continue
        entries[name] = CatalogEntry(name=name, version=int(row["version"]), file=file_name)
    return entries


def schema_path_for(schema_name: str) -> Path:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise ShimScanError(f"unknown schema: {schema_name}", ERR_VALIDATION, kind="unknown_schema")
    return schemas_root() / entry.file
