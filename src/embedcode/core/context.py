from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .clock import utc_now


@dataclass(frozen=True)
class RunContext:
    run_id: str
    cwd: Path
    verbose: bool
    quiet: bool
    log_json: bool

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        cwd: Path | None = None,
    ) -> "RunContext":
        default_run = f"embed-{utc_now().strftime('%Y%m%d-%H%M%S')}"
        resolved_run_id = run_id or os.environ.get("RUN_ID") or default_run
        return cls(
            run_id=resolved_run_id,
            cwd=(cwd or Path.cwd()).resolve(),
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )

    def resolve(self, raw: str | Path) -> Path:
        path = Path(raw).expanduser()
        if path.is_absolute():
            return path
        return (self.cwd / path).resolve()
