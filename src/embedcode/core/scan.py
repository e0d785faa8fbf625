from __future__ import annotations

from pathlib import Path
from typing import Iterable


def _matches(root: Path, patterns: Iterable[str]) -> set[Path]:
    found: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if path.is_file():
                found.add(path)
    return found


def discover_files(root: Path, includes: Iterable[str], excludes: Iterable[str] = ()) -> list[Path]:
    """Files under `root` matching any include glob and no exclude glob, in path order."""
    selected = _matches(root, includes) - _matches(root, excludes)
    return sorted(selected)
