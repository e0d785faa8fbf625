"""JSON rendering shared by CLI payloads and structured logs."""

from __future__ import annotations

import json
from pathlib import PurePath
from typing import Any


def _encode(value: Any) -> Any:
    if isinstance(value, PurePath):
        return value.as_posix()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return str(value)


def dumps_json(payload: Any, pretty: bool = False) -> str:
    """Sorted-key JSON; paths are written with forward slashes, unknown values as `str`."""
    return json.dumps(payload, indent=2 if pretty else None, sort_keys=True, default=_encode)
