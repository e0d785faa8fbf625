from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config.configuration import Configuration
from ..errors import ContentResolutionError
from .directive import Directive


@dataclass
class EmbeddingRecord:
    """Where one directive's fenced block sits in the source and in the result.

    Ranges are half-open and cover only the lines between the fences.
    """

    directive: Directive
    line: int
    source_start: int = -1
    source_end: int = -1
    result_start: int = -1
    result_end: int = -1

    def source_lines(self, source: list[str]) -> list[str]:
        return source[self.source_start : self.source_end]

    def result_lines(self, result: list[str]) -> list[str]:
        return result[self.result_start : self.result_end]


@dataclass(frozen=True)
class MissingEmbedding:
    directive: Directive
    line: int
    error: ContentResolutionError


@dataclass(frozen=True)
class RejectedEmbedding:
    directive: Directive | None
    line: int


@dataclass
class ParsingContext:
    doc_file: Path
    doc_name: str
    source: list[str]
    config: Configuration
    tolerant: bool = False
    result: list[str] = field(default_factory=list)
    line_index: int = 0
    directive: Directive | None = None
    code_fence_open: bool = False
    code_fence_indent: int = 0
    contains_embedding: bool = False
    embeddings: list[EmbeddingRecord] = field(default_factory=list)
    embeddings_not_found: list[MissingEmbedding] = field(default_factory=list)
    unaccepted_embeddings: list[RejectedEmbedding] = field(default_factory=list)

    @property
    def at_eof(self) -> bool:
        return self.line_index >= len(self.source)

    @property
    def current_line(self) -> str:
        return self.source[self.line_index]

    @property
    def current_embedding(self) -> EmbeddingRecord | None:
        if self.directive is None or not self.embeddings:
            return None
        return self.embeddings[-1]

    def advance(self) -> None:
        self.line_index += 1

    def keep_line(self) -> None:
        self.result.append(self.current_line)
        self.advance()

    def open_embedding(self, directive: Directive, line: int) -> None:
        self.directive = directive
        self.contains_embedding = True
        self.embeddings.append(EmbeddingRecord(directive=directive, line=line))

    def close_embedding(self) -> None:
        self.directive = None
        self.code_fence_open = False
        self.code_fence_indent = 0

    def reject_embedding(self) -> None:
        """Drop the directive in progress, if any, and remember the line no transition accepted."""
        if self.current_embedding is not None:
            self.embeddings.pop()
        self.unaccepted_embeddings.append(RejectedEmbedding(self.directive, self.line_index))
        self.close_embedding()

    @property
    def is_changed(self) -> bool:
        return self.result != self.source

    def changed_embeddings(self) -> list[EmbeddingRecord]:
        return [
            record
            for record in self.embeddings
            if record.source_lines(self.source) != record.result_lines(self.result)
        ]
