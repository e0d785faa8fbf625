from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..commands.runner import run_mode
from ..config.arguments import MODES, build_configuration
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_INTERNAL, OK
from .output import build_run_payload, emit, render_error, render_summary


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="embed-code",
        description="Keep code samples in documentation in sync with the code they come from.",
    )
    p.add_argument("--version", action="version", version=f"embed-code {__version__}")
    p.add_argument("--mode", help=f"run mode: one of {', '.join(MODES)}")
    p.add_argument("--config-file-path", help="YAML configuration file; excludes all other path and setting flags")
    p.add_argument("--code-path", help="root directory of the code files")
    p.add_argument("--docs-path", help="root directory of the documentation files")
    p.add_argument("--code-includes", help="comma-separated globs of code files to fragment")
    p.add_argument("--code-excludes", help="comma-separated globs of code files to skip")
    p.add_argument("--doc-includes", help="comma-separated globs of documentation files to process")
    p.add_argument("--doc-excludes", help="comma-separated globs of documentation files to skip")
    p.add_argument("--fragments-dir", help="scratch directory for fragment artifacts")
    p.add_argument("--separator", help="line inserted between partitions of one fragment")
    p.add_argument("--analytics-dir", help="directory for analyze reports")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--run-id", help="run identifier used in logs")
    p.add_argument("--log-format", choices=["text", "json"], default="text", help="stderr log format")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    ctx = RunContext.from_args(ns.run_id, verbose=ns.verbose, quiet=ns.quiet, log_json=ns.log_format == "json")
    try:
        config = build_configuration(ns, base_dir=ctx.cwd)
        log_event(ctx, "info", "cli", "start", mode=ns.mode, code_root=config.code_root, docs_root=config.docs_root)
        report = run_mode(ctx, config, ns.mode)
        if ns.json:
            emit(build_run_payload(ctx, report), as_json=True)
        elif not ctx.quiet:
            print(render_summary(report))
        report.raise_for_status()
        return OK
    except ScriptError as exc:
        print(render_error(as_json=ns.json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=ns.json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
