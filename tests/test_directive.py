from __future__ import annotations

from pathlib import Path

import pytest

from embedcode.config.configuration import Configuration
from embedcode.embedding.directive import Directive, parse_tag
from embedcode.errors import ContentResolutionError, DirectiveParseError, MalformedDirectiveError
from embedcode.fragmentation.fragmenter import Fragmenter


def test_parse_self_closing_tag() -> None:
    directive = Directive.parse('<embed-code file="org/example/Hello.java" fragment="Hello class"/>')
    assert directive == Directive(file="org/example/Hello.java", fragment="Hello class")


def test_parse_tag_with_closing_element_and_line_breaks() -> None:
    text = '<embed-code file="a.txt"\n    start="^foo"\n    end="bar$"></embed-code>'
    assert Directive.parse(text) == Directive(file="a.txt", start="^foo", end="bar$")


def test_unknown_attributes_are_ignored() -> None:
    directive = Directive.parse('<embed-code file="a.txt" lang="java"/>')
    assert directive == Directive(file="a.txt")


def test_unfinished_tag_is_malformed() -> None:
    with pytest.raises(MalformedDirectiveError):
        parse_tag('<embed-code file="a.txt"')


def test_wrong_root_element_is_structural_error() -> None:
    with pytest.raises(DirectiveParseError) as exc:
        Directive.parse('<embed file="a.txt"/>')
    assert not isinstance(exc.value, MalformedDirectiveError)
    assert "embed-code" in exc.value.message


def test_fragment_with_start_is_rejected() -> None:
    with pytest.raises(DirectiveParseError, match="cannot be combined"):
        Directive.parse('<embed-code file="a.txt" fragment="x" start="foo"/>')


def test_fragment_with_end_is_rejected() -> None:
    with pytest.raises(DirectiveParseError, match="cannot be combined"):
        Directive.parse('<embed-code file="a.txt" fragment="x" end="foo"/>')


def test_missing_file_is_rejected() -> None:
    with pytest.raises(DirectiveParseError, match="file"):
        Directive.parse('<embed-code fragment="x"/>')


def test_string_form_reparses_to_the_same_directive() -> None:
    directive = Directive(file="a.txt", start='say "hi"', end="bar$")
    assert str(directive) == '<embed-code file="a.txt" start="say &quot;hi&quot;" end="bar$"/>'
    assert Directive.parse(str(directive)) == directive


def _fragmentize_hello(config: Configuration) -> None:
    Fragmenter(config, Path("org/example/Hello.java")).write_fragments()
    Fragmenter(config, Path("plain-text-to-embed.txt")).write_fragments()


def test_named_fragment_content(config: Configuration) -> None:
    _fragmentize_hello(config)
    lines = Directive(file="org/example/Hello.java", fragment="Hello class").content(config)
    assert len(lines) == 28
    assert lines[22] == "public class Hello {"


def test_glob_slice_content(config: Configuration) -> None:
    _fragmentize_hello(config)
    lines = Directive(file="org/example/Hello.java", start="public class*", end="*System.out*").content(config)
    assert len(lines) == 4
    assert lines[0] == "public class Hello {"
    assert lines[-1].endswith('System.out.println("Hello world");')


def test_unanchored_slice_is_indent_stripped(config: Configuration) -> None:
    _fragmentize_hello(config)
    lines = Directive(file="org/example/Hello.java", start="main", end="world").content(config)
    assert len(lines) == 2
    assert lines[0].startswith("public static void main")
    assert lines[1].startswith("    System.out.println")


def test_anchored_slices_of_text_file(config: Configuration) -> None:
    _fragmentize_hello(config)
    starts = Directive(file="plain-text-to-embed.txt", start="^foo", end="^bar").content(config)
    assert starts == [
        "foo - this line starts with it",
        "This line ends with foo",
        "This line contains foo and bar in the middle",
        "bar - this line starts with it",
    ]
    ends = Directive(file="plain-text-to-embed.txt", start="foo$", end="bar$").content(config)
    assert len(ends) == 6
    assert ends[0] == "This line ends with foo"
    assert ends[-1] == "This line ends with bar"


def test_start_only_runs_to_end_of_file(config: Configuration) -> None:
    _fragmentize_hello(config)
    lines = Directive(file="plain-text-to-embed.txt", start="^bar").content(config)
    assert lines[0] == "bar - this line starts with it"
    assert lines[-1] == "This line ends with bar"


def test_unmatched_pattern_is_resolution_error(config: Configuration) -> None:
    _fragmentize_hello(config)
    with pytest.raises(ContentResolutionError, match="start pattern"):
        Directive(file="org/example/Hello.java", start="^nothing like this").content(config)
    with pytest.raises(ContentResolutionError, match="end pattern"):
        Directive(file="org/example/Hello.java", start="public class*", end="*nothing like this*").content(config)


def test_missing_artifact_is_resolution_error(config: Configuration) -> None:
    _fragmentize_hello(config)
    with pytest.raises(ContentResolutionError):
        Directive(file="org/example/Hello.java", fragment="no such fragment").content(config)
    with pytest.raises(ContentResolutionError):
        Directive(file="org/example/Missing.java").content(config)


def test_text_after_first_element_is_ignored() -> None:
    assert parse_tag('<embed-code file="a.txt" fragment="b"/> (see a.txt)') == {"file": "a.txt", "fragment": "b"}
    assert parse_tag('<embed-code file="a.txt"></embed-code> and <b>more</b>') == {"file": "a.txt"}


def test_open_element_without_end_is_malformed() -> None:
    with pytest.raises(MalformedDirectiveError):
        parse_tag('<embed-code file="a.txt">')
