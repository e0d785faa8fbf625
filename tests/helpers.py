from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from embedcode.core.context import RunContext

ROOT = Path(__file__).resolve().parents[1]
RESOURCES = ROOT / "tests/resources"


def quiet_ctx(tmp_path: Path | None = None) -> RunContext:
    return RunContext.from_args("pytest-run", quiet=True, cwd=tmp_path)


def doc_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").split("\n")


def fenced_block(lines: list[str], directive_marker: str) -> list[str]:
    """Lines between the fences that follow the first line containing `directive_marker`."""
    start = next(i for i, line in enumerate(lines) if directive_marker in line)
    fence = next(i for i in range(start + 1, len(lines)) if lines[i].strip().startswith("```"))
    end = next(i for i in range(fence + 1, len(lines)) if lines[i].strip().startswith("```"))
    return lines[fence + 1 : end]


def run_embed_code(*args: str, cwd: Path) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    env.setdefault("RUN_ID", "pytest-run")
    return subprocess.run(
        [sys.executable, "-m", "embedcode.cli", *args],
        cwd=cwd,
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )
