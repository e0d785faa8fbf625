"""Line states of a documentation file and the transitions between them.

Each state pairs a recognizer, which decides whether the current line belongs to
the state, with an accept action, which consumes the line. Outgoing states are
tried in table order and the first recognizer that matches wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from ..errors import ContentResolutionError, DirectiveParseError, MalformedDirectiveError
from ..indent import leading_spaces
from .context import EmbeddingRecord, MissingEmbedding, ParsingContext
from .directive import TAG_PREFIX, Directive

CODE_FENCE = "```"


class State(Enum):
    START = "start"
    REGULAR_LINE = "regular_line"
    EMBED_INSTRUCTION = "embed_instruction"
    BLANK_LINE = "blank_line"
    CODE_FENCE_START = "code_fence_start"
    CODE_SAMPLE_LINE = "code_sample_line"
    CODE_FENCE_END = "code_fence_end"
    FINISH = "finish"


Transitions = Mapping[State, tuple[State, ...]]

TRANSITIONS: Transitions = {
    State.START: (State.FINISH, State.EMBED_INSTRUCTION, State.REGULAR_LINE),
    State.REGULAR_LINE: (State.FINISH, State.EMBED_INSTRUCTION, State.REGULAR_LINE),
    State.EMBED_INSTRUCTION: (State.CODE_FENCE_START, State.BLANK_LINE),
    State.BLANK_LINE: (State.CODE_FENCE_START, State.BLANK_LINE),
    State.CODE_FENCE_START: (State.CODE_FENCE_END, State.CODE_SAMPLE_LINE),
    State.CODE_SAMPLE_LINE: (State.CODE_FENCE_END, State.CODE_SAMPLE_LINE),
    State.CODE_FENCE_END: (State.FINISH, State.EMBED_INSTRUCTION, State.REGULAR_LINE),
}


def _never(ctx: ParsingContext) -> bool:
    return False


def _noop(ctx: ParsingContext) -> None:
    return None


def _recognize_regular_line(ctx: ParsingContext) -> bool:
    return not ctx.at_eof


def _recognize_embed_instruction(ctx: ParsingContext) -> bool:
    return ctx.directive is None and not ctx.at_eof and ctx.current_line.strip().startswith(TAG_PREFIX)


def _accept_embed_instruction(ctx: ParsingContext) -> None:
    first_line = ctx.line_index
    body: list[str] = []
    last_error: MalformedDirectiveError | None = None
    while not ctx.at_eof:
        body.append(ctx.current_line)
        try:
            directive = Directive.parse("\n".join(body))
        except MalformedDirectiveError as exc:
            last_error = exc
            ctx.keep_line()
            continue
        except DirectiveParseError as exc:
            raise exc.located(ctx.doc_name, ctx.line_index)
        ctx.keep_line()
        ctx.open_embedding(directive, first_line)
        return
    reason = last_error.message if last_error is not None else "no tag text"
    raise DirectiveParseError(
        f"embed-code tag is not closed before the end of the file ({reason})",
        path=ctx.doc_name,
        line=first_line,
    )


def _recognize_blank_line(ctx: ParsingContext) -> bool:
    return (
        not ctx.at_eof
        and ctx.directive is not None
        and not ctx.code_fence_open
        and ctx.current_line.strip() == ""
    )


def _recognize_code_fence_start(ctx: ParsingContext) -> bool:
    return not ctx.at_eof and ctx.current_line.strip().startswith(CODE_FENCE)


def _accept_code_fence_start(ctx: ParsingContext) -> None:
    ctx.code_fence_open = True
    ctx.code_fence_indent = leading_spaces(ctx.current_line)
    ctx.keep_line()
    record = ctx.current_embedding
    if record is not None:
        record.source_start = ctx.line_index
        record.result_start = len(ctx.result)


def _recognize_code_sample_line(ctx: ParsingContext) -> bool:
    return ctx.code_fence_open and not ctx.at_eof


def _accept_code_sample_line(ctx: ParsingContext) -> None:
    ctx.advance()


def _recognize_code_fence_end(ctx: ParsingContext) -> bool:
    if ctx.at_eof or not ctx.code_fence_open:
        return False
    return ctx.current_line.startswith(" " * ctx.code_fence_indent + CODE_FENCE)


def _accept_code_fence_end(ctx: ParsingContext) -> None:
    record = ctx.current_embedding
    if record is not None:
        record.source_end = ctx.line_index
        _render_sample(ctx, record)
        record.result_end = len(ctx.result)
    ctx.keep_line()
    ctx.close_embedding()


def _render_sample(ctx: ParsingContext, record: EmbeddingRecord) -> None:
    try:
        lines = record.directive.content(ctx.config)
    except ContentResolutionError as exc:
        exc.located(ctx.doc_name, record.line)
        if not ctx.tolerant:
            raise
        ctx.embeddings_not_found.append(MissingEmbedding(record.directive, record.line, exc))
        ctx.result.extend(record.source_lines(ctx.source))
        return
    indent = " " * ctx.code_fence_indent
    ctx.result.extend(indent + line for line in lines)


def _recognize_finish(ctx: ParsingContext) -> bool:
    return ctx.at_eof


@dataclass(frozen=True)
class Transition:
    recognize: Callable[[ParsingContext], bool]
    accept: Callable[[ParsingContext], None]


STATE_TRANSITIONS: dict[State, Transition] = {
    State.START: Transition(_never, _noop),
    State.REGULAR_LINE: Transition(_recognize_regular_line, ParsingContext.keep_line),
    State.EMBED_INSTRUCTION: Transition(_recognize_embed_instruction, _accept_embed_instruction),
    State.BLANK_LINE: Transition(_recognize_blank_line, ParsingContext.keep_line),
    State.CODE_FENCE_START: Transition(_recognize_code_fence_start, _accept_code_fence_start),
    State.CODE_SAMPLE_LINE: Transition(_recognize_code_sample_line, _accept_code_sample_line),
    State.CODE_FENCE_END: Transition(_recognize_code_fence_end, _accept_code_fence_end),
    State.FINISH: Transition(_recognize_finish, _noop),
}
