from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..config.configuration import Configuration
from ..core.context import RunContext
from ..core.fs import remove_tree
from ..core.logging import log_event
from ..core.scan import discover_files
from ..embedding.processor import EmbeddingProcessor
from ..errors import ScriptError
from ..fragmentation.fragmenter import fragmentize_all
from .analytics import write_analytics
from .report import RunReport


def doc_files(config: Configuration) -> list[Path]:
    return discover_files(config.docs_root, config.doc_includes, config.doc_excludes)


def _relative(config: Configuration, doc_file: Path) -> str:
    return doc_file.relative_to(config.docs_root).as_posix()


def _fragmentize(ctx: RunContext, config: Configuration, report: RunReport) -> None:
    fragmentation = fragmentize_all(ctx, config)
    report.fragmented_files = sum(1 for result in fragmentation.results if not result.skipped)
    for name, exc in fragmentation.errors.items():
        report.errors[f"code:{name}"] = exc


def _check_docs(ctx: RunContext, config: Configuration, report: RunReport) -> None:
    for doc_file in doc_files(config):
        rel = _relative(config, doc_file)
        if rel in report.errors:
            continue
        if rel not in report.processed:
            report.processed.append(rel)
        try:
            up_to_date = EmbeddingProcessor(config, doc_file).is_up_to_date()
        except ScriptError as exc:
            report.errors[rel] = exc
            log_event(ctx, "error", "check", "file_failed", file=rel, kind=exc.kind, error=str(exc))
            continue
        if not up_to_date:
            report.drifted.append(rel)
            log_event(ctx, "warning", "check", "drift", file=rel)


def run_embed(ctx: RunContext, config: Configuration) -> RunReport:
    """Refresh every documentation file, then verify nothing is left out of date."""
    report = RunReport(mode="embed")
    _fragmentize(ctx, config, report)
    for doc_file in doc_files(config):
        rel = _relative(config, doc_file)
        report.processed.append(rel)
        try:
            written = EmbeddingProcessor(config, doc_file).embed()
        except ScriptError as exc:
            report.errors[rel] = exc
            log_event(ctx, "error", "embed", "file_failed", file=rel, kind=exc.kind, error=str(exc))
            continue
        if written:
            report.updated.append(rel)
            log_event(ctx, "info", "embed", "updated", file=rel)
    _check_docs(ctx, config, report)
    return report


def run_check(ctx: RunContext, config: Configuration) -> RunReport:
    report = RunReport(mode="check")
    _fragmentize(ctx, config, report)
    _check_docs(ctx, config, report)
    return report


def run_analyze(ctx: RunContext, config: Configuration) -> RunReport:
    """Report changed and unresolvable embeddings without touching documentation files.

    The fragments directory is removed once the reports are written.
    """
    report = RunReport(mode="analyze")
    _fragmentize(ctx, config, report)
    not_found: list[str] = []
    for doc_file in doc_files(config):
        rel = _relative(config, doc_file)
        report.processed.append(rel)
        try:
            parsed = EmbeddingProcessor(config, doc_file, tolerant=True).traverse()
        except ScriptError as exc:
            report.errors[rel] = exc
            not_found.append(f"{rel} | {exc}")
            log_event(ctx, "error", "analyze", "file_failed", file=rel, kind=exc.kind, error=str(exc))
            continue
        changed = parsed.changed_embeddings()
        for record in changed:
            report.changed_embeddings.append(f"{rel} : {record.directive}")
        if changed:
            report.drifted.append(rel)
            log_event(ctx, "warning", "analyze", "drift", file=rel, embeddings=len(changed))
        for missing in parsed.embeddings_not_found:
            entry = f"{rel} | {missing.directive} | {missing.error.message}"
            report.missing_embeddings.append(entry)
            not_found.append(entry)
    report.analytics = write_analytics(config, report.changed_embeddings, not_found)
    log_event(ctx, "info", "analyze", "reports_written", analytics_dir=config.analytics_dir)
    if remove_tree(config.fragments_dir):
        log_event(ctx, "debug", "analyze", "fragments_removed", fragments_dir=config.fragments_dir)
    return report


MODE_RUNNERS: dict[str, Callable[[RunContext, Configuration], RunReport]] = {
    "embed": run_embed,
    "check": run_check,
    "analyze": run_analyze,
}


def run_mode(ctx: RunContext, config: Configuration, mode: str) -> RunReport:
    return MODE_RUNNERS[mode](ctx, config)
