from __future__ import annotations

from pathlib import Path

from ..config.configuration import Configuration
from ..core.fs import write_lines

CHANGED_FILES_REPORT = "embeddings-changed-files.txt"
NOT_FOUND_FILES_REPORT = "embeddings-not-found-files.txt"


def write_analytics(config: Configuration, changed: list[str], not_found: list[str]) -> list[Path]:
    """Write the two analyze reports, one record per line; both files always exist afterwards."""
    return [
        write_lines(config.analytics_dir / CHANGED_FILES_REPORT, changed),
        write_lines(config.analytics_dir / NOT_FOUND_FILES_REPORT, not_found),
    ]
