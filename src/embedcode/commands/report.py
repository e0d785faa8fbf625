from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import ScriptError, UnexpectedDiff
from ..exit_codes import OK


@dataclass
class RunReport:
    mode: str
    fragmented_files: int = 0
    processed: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    drifted: list[str] = field(default_factory=list)
    changed_embeddings: list[str] = field(default_factory=list)
    missing_embeddings: list[str] = field(default_factory=list)
    errors: dict[str, ScriptError] = field(default_factory=dict)
    analytics: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and not self.drifted

    def failure(self) -> ScriptError | None:
        """The error this run ends with, or None when it succeeded."""
        if self.errors:
            if len(self.errors) == 1:
                return next(iter(self.errors.values()))
            first = next(iter(self.errors.values()))
            listing = "\n".join(f"- {name}: {exc}" for name, exc in self.errors.items())
            return ScriptError(f"{self.mode} failed for {len(self.errors)} files:\n{listing}", first.code, kind=first.kind)
        if self.drifted:
            return UnexpectedDiff("documentation is out of date with the code samples", files=list(self.drifted))
        return None

    def raise_for_status(self) -> None:
        failure = self.failure()
        if failure is not None:
            raise failure

    @property
    def exit_code(self) -> int:
        failure = self.failure()
        return OK if failure is None else failure.code

    def to_payload(self) -> dict[str, object]:
        return {
            "mode": self.mode,
            "fragmented_files": self.fragmented_files,
            "processed": list(self.processed),
            "updated": list(self.updated),
            "drifted": list(self.drifted),
            "changed_embeddings": list(self.changed_embeddings),
            "missing_embeddings": list(self.missing_embeddings),
            "errors": [
                {"file": name, "kind": exc.kind, "code": exc.code, "message": str(exc)}
                for name, exc in self.errors.items()
            ],
            "analytics": [str(path) for path in self.analytics],
        }
