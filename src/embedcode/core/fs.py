from __future__ import annotations

import os
import re
import shutil
import stat
import tempfile
from pathlib import Path

from ..errors import ScriptError
from ..exit_codes import ERR_GENERIC

_NEWLINE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF, keeping the empty tail a trailing newline produces."""
    return _NEWLINE.split(text)


def read_text(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ScriptError(f"cannot decode {path} as UTF-8: {exc.reason}", ERR_GENERIC, kind="decode_error") from exc


def read_lines(path: Path) -> list[str]:
    """Read a file as lines without the empty element after a final newline."""
    lines = split_lines(read_text(path))
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_text_file(path: Path) -> bool:
    try:
        path.read_bytes().decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def write_text_atomic(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else 0o644
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.chmod(tmp_name, mode | stat.S_IWUSR | stat.S_IRUSR)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path


def write_lines(path: Path, lines: list[str]) -> Path:
    """Write lines terminated by a single newline each; no lines gives an empty file."""
    content = "\n".join(lines) + "\n" if lines else ""
    return write_text_atomic(path, content)


def remove_tree(path: Path) -> bool:
    if not path.exists():
        return False
    shutil.rmtree(path)
    return True
