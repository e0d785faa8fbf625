"""Leading-space indentation helpers.

Only spaces count as indentation; a tab is an ordinary character.
"""

from __future__ import annotations

from typing import Iterable


def leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def max_common_indent(lines: Iterable[str]) -> int:
    """Number of leading spaces shared by every non-blank line; 0 if all lines are blank."""
    widths = [leading_spaces(line) for line in lines if line.strip()]
    return min(widths) if widths else 0


def cut_indent(lines: Iterable[str], width: int) -> list[str]:
    out: list[str] = []
    for line in lines:
        if not line or len(line) < width:
            out.append(line)
        else:
            out.append(line[width:])
    return out


def strip_common_indent(lines: list[str]) -> list[str]:
    return cut_indent(lines, max_common_indent(lines))
