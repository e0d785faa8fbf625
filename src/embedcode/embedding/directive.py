"""The `<embed-code .../>` tag: parsing, validation and content resolution."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from xml.sax.saxutils import escape

from ..config.configuration import Configuration
from ..errors import ContentResolutionError, DirectiveParseError, MalformedDirectiveError
from ..fragmentation.artifacts import read_artifact
from ..fragmentation.model import DEFAULT_FRAGMENT
from ..indent import strip_common_indent
from .pattern import Pattern

TAG = "embed-code"
TAG_PREFIX = f"<{TAG}"
ATTRIBUTES = ("file", "fragment", "start", "end")
_QUOTE_ENTITIES = {'"': "&quot;"}


def parse_tag(text: str) -> dict[str, str]:
    """Attributes of the first `<embed-code>` element in `text`.

    Anything after that element on the same line is ignored. Raises
    `MalformedDirectiveError` while the element is not complete yet.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    root: ET.Element | None = None
    try:
        parser.feed(text.strip())
        for event, element in parser.read_events():
            if root is None:
                root = element
                if element.tag != TAG:
                    raise DirectiveParseError(f"expected <{TAG}> element, found <{element.tag}>")
            elif event == "end" and element is root:
                return dict(element.attrib)
    except ET.ParseError as exc:
        raise MalformedDirectiveError(f"malformed embed-code tag: {exc}") from exc
    raise MalformedDirectiveError("malformed embed-code tag: element is not closed")


@dataclass(frozen=True)
class Directive:
    file: str
    fragment: str | None = None
    start: str | None = None
    end: str | None = None

    @classmethod
    def from_attributes(cls, attributes: dict[str, str]) -> "Directive":
        file = (attributes.get("file") or "").strip()
        if not file:
            raise DirectiveParseError("embed-code tag requires a non-empty `file` attribute")
        fragment = attributes.get("fragment") or None
        start = attributes.get("start") or None
        end = attributes.get("end") or None
        if fragment is not None and (start is not None or end is not None):
            raise DirectiveParseError("`fragment` cannot be combined with `start` or `end`")
        return cls(file=file, fragment=fragment, start=start, end=end)

    @classmethod
    def parse(cls, text: str) -> "Directive":
        return cls.from_attributes(parse_tag(text))

    @property
    def is_slice(self) -> bool:
        return self.start is not None or self.end is not None

    def content(self, config: Configuration) -> list[str]:
        """Lines this directive puts into its code fence."""
        if self.fragment is not None:
            return read_artifact(config, self.file, self.fragment)
        lines = read_artifact(config, self.file, DEFAULT_FRAGMENT)
        if not self.is_slice:
            return lines
        return strip_common_indent(self._slice(lines))

    def _slice(self, lines: list[str]) -> list[str]:
        first = 0
        if self.start is not None:
            found = Pattern.compile(self.start).find(lines)
            if found is None:
                raise ContentResolutionError(f"no line of `{self.file}` matches start pattern `{self.start}`")
            first = found
        last = len(lines) - 1
        if self.end is not None:
            found = Pattern.compile(self.end).find(lines, first)
            if found is None:
                raise ContentResolutionError(f"no line of `{self.file}` matches end pattern `{self.end}`")
            last = found
        return lines[first : last + 1]

    def __str__(self) -> str:
        parts = [TAG_PREFIX]
        for name in ATTRIBUTES:
            value = getattr(self, name)
            if value is not None:
                parts.append(f'{name}="{escape(value, _QUOTE_ENTITIES)}"')
        return " ".join(parts) + "/>"
