from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase


@dataclass(frozen=True)
class Pattern:
    """A line glob with optional `^`/`$` anchors.

    Unanchored patterns match anywhere in the line: `main` behaves like `*main*`,
    `^main` like `main*`, and `main$` like `*main`.
    """

    source: str
    glob: str

    @classmethod
    def compile(cls, source: str) -> "Pattern":
        glob = source
        if glob.startswith("^"):
            glob = glob[1:]
        elif not glob.startswith("*"):
            glob = "*" + glob
        if glob.endswith("$"):
            glob = glob[:-1]
        elif not glob.endswith("*"):
            glob = glob + "*"
        return cls(source=source, glob=glob)

    def matches(self, line: str) -> bool:
        return fnmatchcase(line, self.glob)

    def find(self, lines: list[str], start: int = 0) -> int | None:
        for index in range(start, len(lines)):
            if self.matches(lines[index]):
                return index
        return None

    def __str__(self) -> str:
        return self.source
