from __future__ import annotations

from pathlib import Path

from ..config.configuration import Configuration
from ..core.fs import read_text, split_lines, write_text_atomic
from ..errors import StateMachineError
from .context import EmbeddingRecord, ParsingContext
from .states import STATE_TRANSITIONS, TRANSITIONS, State, Transitions


class EmbeddingProcessor:
    """Runs the line state machine over one documentation file.

    `tolerant` keeps going when a directive's content cannot be resolved: the
    existing block is kept and the directive is reported in
    `ParsingContext.embeddings_not_found` instead of raising.
    """

    def __init__(
        self,
        config: Configuration,
        doc_file: Path,
        transitions: Transitions = TRANSITIONS,
        tolerant: bool = False,
    ) -> None:
        self.config = config
        self.doc_file = doc_file if doc_file.is_absolute() else config.docs_root / doc_file
        self.transitions = transitions
        self.tolerant = tolerant

    @property
    def relative_path(self) -> str:
        try:
            return self.doc_file.relative_to(self.config.docs_root).as_posix()
        except ValueError:
            return str(self.doc_file)

    def traverse(self) -> ParsingContext:
        ctx = ParsingContext(
            doc_file=self.doc_file,
            doc_name=self.relative_path,
            source=split_lines(read_text(self.doc_file)),
            config=self.config,
            tolerant=self.tolerant,
        )
        state = State.START
        while state is not State.FINISH:
            state = self._step(ctx, state)
        if ctx.unaccepted_embeddings:
            stuck = ctx.unaccepted_embeddings[0]
            detail = f" while embedding {stuck.directive}" if stuck.directive is not None else ""
            raise StateMachineError(
                f"no transition from the current state accepts the line{detail}",
                path=self.relative_path,
                line=stuck.line,
            )
        return ctx

    def _step(self, ctx: ParsingContext, state: State) -> State:
        for candidate in self.transitions.get(state, ()):
            transition = STATE_TRANSITIONS[candidate]
            if transition.recognize(ctx):
                transition.accept(ctx)
                return candidate
        ctx.reject_embedding()
        if ctx.at_eof:
            return State.FINISH
        ctx.keep_line()
        return State.REGULAR_LINE

    def embed(self) -> bool:
        """Rewrite the file with fresh samples; returns whether the file was written."""
        ctx = self.traverse()
        if not ctx.contains_embedding or not ctx.is_changed:
            return False
        write_text_atomic(self.doc_file, "\n".join(ctx.result))
        return True

    def is_up_to_date(self) -> bool:
        return not self.traverse().is_changed

    def find_changed_embeddings(self) -> list[EmbeddingRecord]:
        return self.traverse().changed_embeddings()
