from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import FragmentationError
from ..indent import cut_indent, max_common_indent

DEFAULT_FRAGMENT = "_default"


@dataclass(frozen=True)
class Partition:
    """Inclusive 0-based line range; `end == start - 1` denotes an empty range."""

    start: int
    end: int

    def select(self, lines: list[str]) -> list[str]:
        return lines[self.start : self.end + 1]


@dataclass(frozen=True)
class Fragment:
    name: str
    partitions: tuple[Partition, ...]

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_FRAGMENT

    def render(self, content: list[str], separator: str) -> list[str]:
        """Partition lines joined by separator lines, with the shared indent removed."""
        chunks = [part.select(content) for part in self.partitions]
        width = max_common_indent(line for chunk in chunks for line in chunk)
        out: list[str] = []
        for index, chunk in enumerate(chunks):
            if index:
                out.append(separator)
            out.extend(cut_indent(chunk, width))
        return out


@dataclass
class FragmentBuilder:
    name: str
    source: str
    closed: list[Partition] = field(default_factory=list)
    open_start: int | None = None

    @property
    def is_open(self) -> bool:
        return self.open_start is not None

    def open(self, cursor: int) -> None:
        if self.open_start is not None:
            raise FragmentationError(
                f"fragment `{self.name}` is opened again before its previous #enddocfragment",
                path=self.source,
            )
        self.open_start = cursor

    def close(self, cursor: int) -> None:
        if self.open_start is None:
            raise FragmentationError(
                f"cannot end the fragment `{self.name}` as it wasn't started",
                path=self.source,
            )
        self.closed.append(Partition(self.open_start, cursor - 1))
        self.open_start = None

    def build(self, content_length: int) -> Fragment:
        partitions = list(self.closed)
        if self.open_start is not None:
            partitions.append(Partition(self.open_start, content_length - 1))
        return Fragment(self.name, tuple(partitions))


def default_fragment(content_length: int) -> Fragment:
    return Fragment(DEFAULT_FRAGMENT, (Partition(0, content_length - 1),))
