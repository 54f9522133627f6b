"""Shim identifiers: canonical base names and collision suffixes."""

from __future__ import annotations

from typing import Callable


def base_name(family: str, app: str, tool: str | None, leaf: str, version: str, include_version: bool) -> str:
    middle = tool if tool else app
    name = f"{family}-{middle}-{leaf}"
    if include_version and version:
        name = f"{name}-v{version}"
    return name


def uniquify(name: str, exists: Callable[[str], bool]) -> str:
    if not exists(name):
        return name
    n = 2
    while exists(f"{name}-{n}"):
        n += 1
    return f"{name}-{n}"
