from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from shimscan.scan.naming import base_name, uniquify

_segment = st.from_regex(r"[a-z0-9][a-z0-9_.]{0,11}", fullmatch=True)


@pytest.mark.unit
@given(_segment, _segment, st.none() | _segment, _segment, st.just("") | _segment, st.booleans())
def test_base_name_is_deterministic(family: str, app: str, tool: str | None, leaf: str, version: str, include: bool) -> None:
    first = base_name(family, app, tool, leaf, version, include)
    assert first == base_name(family, app, tool, leaf, version, include)
    suffix = f"-v{version}" if include and version else ""
    assert first == f"{family}-{tool or app}-{leaf}{suffix}"


@pytest.mark.unit
@given(_segment, st.sets(st.integers(min_value=1, max_value=12), max_size=12))
def test_uniquify_picks_lowest_free_suffix(base: str, taken_suffixes: set[int]) -> None:
    taken = {base if n == 1 else f"{base}-{n}" for n in taken_suffixes}
    result = uniquify(base, taken.__contains__)
    assert result not in taken
    if base not in taken:
        assert result == base
    else:
        expected = min(n for n in range(2, 20) if f"{base}-{n}" not in taken)
        assert result == f"{base}-{expected}"
