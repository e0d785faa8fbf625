"""CLI payload output helpers."""

from __future__ import annotations

from ..commands.report import RunReport
from ..core.context import RunContext
from ..core.serialize import dumps_json


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def build_base_payload(ctx: RunContext, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "embed-code",
        "status": status,
        "run_id": ctx.run_id,
    }


def build_run_payload(ctx: RunContext, report: RunReport) -> dict[str, object]:
    payload = build_base_payload(ctx, status="ok" if report.ok else "fail")
    payload["report"] = report.to_payload()
    return payload


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "embed-code.error.v1",
                "schema_version": 1,
                "tool": "embed-code",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return message


def render_summary(report: RunReport) -> str:
    parts = [f"{report.mode}: {len(report.processed)} documentation files processed"]
    if report.mode == "embed":
        parts.append(f"{len(report.updated)} updated")
    if report.mode == "analyze":
        parts.append(f"{len(report.changed_embeddings)} changed embeddings")
        parts.append(f"{len(report.missing_embeddings)} missing embeddings")
    else:
        parts.append(f"{len(report.drifted)} out of date")
    return ", ".join(parts)
