from __future__ import annotations

from dataclasses import dataclass, field

from .exit_codes import ERR_CONFIG, ERR_DIRECTIVE, ERR_DRIFT, ERR_FRAGMENTATION, ERR_RESOLUTION


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigurationError(ScriptError):
    code: int = ERR_CONFIG
    kind: str = "configuration_error"


@dataclass
class FragmentationError(ScriptError):
    code: int = ERR_FRAGMENTATION
    kind: str = "fragmentation_error"
    path: str | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (file: {self.path})"


@dataclass
class DocumentError(ScriptError):
    """An error bound to a position inside a documentation file."""

    code: int = ERR_DIRECTIVE
    kind: str = "document_error"
    path: str | None = None
    line: int | None = None

    def located(self, path: str, line: int | None = None) -> "DocumentError":
        if self.path is None:
            self.path = path
        if self.line is None:
            self.line = line
        return self

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        if self.line is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.line}: {self.message}"


@dataclass
class DirectiveParseError(DocumentError):
    kind: str = "directive_parse_error"


@dataclass
class MalformedDirectiveError(DirectiveParseError):
    """The tag text is not well-formed XML yet; more lines may complete it."""

    kind: str = "malformed_directive"


@dataclass
class StateMachineError(DocumentError):
    kind: str = "state_machine_error"


@dataclass
class ContentResolutionError(DocumentError):
    code: int = ERR_RESOLUTION
    kind: str = "content_resolution_error"


@dataclass
class UnexpectedDiff(ScriptError):
    code: int = ERR_DRIFT
    kind: str = "unexpected_diff"
    files: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.files:
            return self.message
        listing = "\n".join(f"- {name}" for name in self.files)
        return f"{self.message}\n{listing}"
