"""Addressing and I/O of fragment artifacts under the fragments directory."""

from __future__ import annotations

import hashlib
from pathlib import Path

from ..config.configuration import Configuration
from ..core.fs import read_lines, write_lines
from ..errors import ContentResolutionError
from .model import DEFAULT_FRAGMENT

HASH_PREFIX_LENGTH = 8


def fragment_hash(name: str) -> str:
    return hashlib.sha1(name.encode("utf-8")).hexdigest()[:HASH_PREFIX_LENGTH]


def split_extension(name: str) -> tuple[str, str]:
    """Split `name` at its last dot; a leading dot counts, so `.env` has extension `.env`."""
    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]


def artifact_path(config: Configuration, code_file: str | Path, fragment: str = DEFAULT_FRAGMENT) -> Path:
    """Location of the artifact for `fragment` of `code_file`.

    `code_file` is either relative to the code root or an absolute path inside it.
    """
    path = Path(code_file)
    relative = path.relative_to(config.code_root) if path.is_absolute() else path
    target = config.fragments_dir / relative
    if fragment == DEFAULT_FRAGMENT:
        return target
    stem, extension = split_extension(target.name)
    return target.with_name(f"{stem}-{fragment_hash(fragment)}{extension}")


def write_artifact(path: Path, lines: list[str]) -> Path:
    return write_lines(path, lines)


def read_artifact(config: Configuration, code_file: str | Path, fragment: str = DEFAULT_FRAGMENT) -> list[str]:
    path = artifact_path(config, code_file, fragment)
    if not path.is_file():
        label = "the whole file" if fragment == DEFAULT_FRAGMENT else f"fragment `{fragment}`"
        raise ContentResolutionError(f"no artifact for {label} of `{code_file}` (expected {path})")
    return read_lines(path)
