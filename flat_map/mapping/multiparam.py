"""Multiparam fragment extraction.

A composite value may arrive as several flat keys sharing a prefix:

    {"born_on(1i)": "1990", "born_on(2i)": "7", "born_on(3i)": "14"}

Fragments are 1-based. An ``i`` suffix casts to ``int``, ``f`` to ``float``.
Blank fragments become ``None``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping as MappingABC
from typing import Any

_CASTS = {"i": int, "f": float}


def _fragment_pattern(full_name: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(full_name)}\((\d+)([if])?\)$")


def _cast(value: Any, kind: str | None) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if kind is None:
        return value
    return _CASTS[kind](value)


def extract_fragments(params: MappingABC[str, Any], full_name: str) -> list[Any] | None:
    """Collect the fragments of ``full_name`` into a positional list.

    Returns:
        The assembled list (gaps filled with ``None``), or ``None`` when
        ``params`` holds no fragment for ``full_name``.
    """
    pattern = _fragment_pattern(full_name)
    parts: dict[int, Any] = {}
    for key, value in params.items():
        match = pattern.match(str(key))
        if match is None:
            continue
        position = int(match.group(1))
        if position < 1:
            continue
        parts[position] = _cast(value, match.group(2))

    if not parts:
        return None

    values: list[Any] = [None] * max(parts)
    for position, value in parts.items():
        values[position - 1] = value
    return values
