"""YAML run configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..contracts.schema import validate
from .errors import ShimScanError
from .exit_codes import ERR_CONFIG, ERR_VALIDATION

CONFIG_SCHEMA = "shimscan.scan-config.v1"


def load_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ShimScanError(f"config file not found: {path}", ERR_CONFIG, kind="missing_config")
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ShimScanError(f"config file is not valid YAML: {path}: {exc}", ERR_CONFIG, kind="invalid_config") from exc
    if payload is None:
        return {}
    try:
        validate(CONFIG_SCHEMA, payload)
    except ShimScanError as exc:
        if exc.code != ERR_VALIDATION:
            raise
        raise ShimScanError(f"{path}: {exc.message}", ERR_CONFIG, kind="invalid_config") from exc
    return dict(payload)
