from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_FRAGMENTS_DIR = "./build/fragments"
DEFAULT_ANALYTICS_DIR = "./build/analytics"
DEFAULT_SEPARATOR = "..."
DEFAULT_CODE_INCLUDES = ("**/*",)
DEFAULT_DOC_INCLUDES = ("**/*.md", "**/*.html")


def split_list(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a comma-separated string or a list of strings into trimmed, non-empty items."""
    if raw is None:
        return ()
    items = raw.split(",") if isinstance(raw, str) else list(raw)
    return tuple(item.strip() for item in items if item and item.strip())


@dataclass(frozen=True)
class Configuration:
    code_root: Path
    docs_root: Path
    fragments_dir: Path
    analytics_dir: Path
    code_includes: tuple[str, ...] = DEFAULT_CODE_INCLUDES
    code_excludes: tuple[str, ...] = ()
    doc_includes: tuple[str, ...] = DEFAULT_DOC_INCLUDES
    doc_excludes: tuple[str, ...] = ()
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_roots(
        cls,
        code_root: str | Path,
        docs_root: str | Path,
        *,
        base_dir: Path | None = None,
        fragments_dir: str | Path | None = None,
        analytics_dir: str | Path | None = None,
        code_includes: str | Iterable[str] | None = None,
        code_excludes: str | Iterable[str] | None = None,
        doc_includes: str | Iterable[str] | None = None,
        doc_excludes: str | Iterable[str] | None = None,
        separator: str | None = None,
    ) -> "Configuration":
        base = (base_dir or Path.cwd()).resolve()

        def _path(raw: str | Path) -> Path:
            path = Path(raw).expanduser()
            return path if path.is_absolute() else (base / path).resolve()

        return cls(
            code_root=_path(code_root),
            docs_root=_path(docs_root),
            fragments_dir=_path(fragments_dir or DEFAULT_FRAGMENTS_DIR),
            analytics_dir=_path(analytics_dir or DEFAULT_ANALYTICS_DIR),
            code_includes=split_list(code_includes) or DEFAULT_CODE_INCLUDES,
            code_excludes=split_list(code_excludes),
            doc_includes=split_list(doc_includes) or DEFAULT_DOC_INCLUDES,
            doc_excludes=split_list(doc_excludes),
            separator=DEFAULT_SEPARATOR if separator is None or separator == "" else separator,
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "code_root": str(self.code_root),
            "docs_root": str(self.docs_root),
            "fragments_dir": str(self.fragments_dir),
            "analytics_dir": str(self.analytics_dir),
            "code_includes": list(self.code_includes),
            "code_excludes": list(self.code_excludes),
            "doc_includes": list(self.doc_includes),
            "doc_excludes": list(self.doc_excludes),
            "separator": self.separator,
        }
