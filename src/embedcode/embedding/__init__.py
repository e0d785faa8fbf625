"""Splice fragment artifacts into the code fences of documentation files."""

from __future__ import annotations

from .context import EmbeddingRecord, ParsingContext
from .directive import Directive
from .pattern import Pattern
from .processor import EmbeddingProcessor
from .states import TRANSITIONS, State

__all__ = [
    "TRANSITIONS",
    "Directive",
    "EmbeddingProcessor",
    "EmbeddingRecord",
    "ParsingContext",
    "Pattern",
    "State",
]
