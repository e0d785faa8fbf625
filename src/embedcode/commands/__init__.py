"""Run modes: embed, check and analyze."""

from __future__ import annotations

from .report import RunReport
from .runner import MODE_RUNNERS, run_analyze, run_check, run_embed, run_mode

__all__ = ["MODE_RUNNERS", "RunReport", "run_analyze", "run_check", "run_embed", "run_mode"]
