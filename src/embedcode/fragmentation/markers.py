from __future__ import annotations

import re

FRAGMENT_START = "#docfragment"
FRAGMENT_END = "#enddocfragment"

_QUOTED = re.compile(r'"([^"]*)"')


def _names_after(line: str, marker: str) -> list[str]:
    index = line.find(marker)
    if index < 0:
        return []
    rest = line[index + len(marker) :]
    return [name.strip() for name in _QUOTED.findall(rest)]


def fragment_starts(line: str) -> list[str]:
    return _names_after(line, FRAGMENT_START)


def fragment_ends(line: str) -> list[str]:
    return _names_after(line, FRAGMENT_END)
