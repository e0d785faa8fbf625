from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..core.yaml_utils import load_yaml
from ..errors import ConfigurationError
from .configuration import Configuration

SCHEMA_NAME = "embed-code-config"


def schema_path() -> Path:
    return Path(__file__).resolve().parent / "schema" / f"{SCHEMA_NAME}.schema.json"


def validate_payload(payload: Any, source: str) -> None:
    import jsonschema

    schema = json.loads(schema_path().read_text(encoding="utf-8"))
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ConfigurationError(f"invalid config file {source} at {loc}: {exc.message}") from exc


def require_directory(path: Path, label: str) -> Path:
    if not path.exists():
        raise ConfigurationError(f"{label} does not exist: {path}")
    if not path.is_dir():
        raise ConfigurationError(f"{label} is not a directory: {path}")
    return path


def require_roots(config: Configuration) -> Configuration:
    require_directory(config.code_root, "code root")
    require_directory(config.docs_root, "documentation root")
    return config


def load_config_file(path: str | Path, base_dir: Path | None = None) -> Configuration:
    """Read a YAML config file into a `Configuration`.

    Relative paths inside the file are resolved against `base_dir`, the current
    working directory by default, not against the file's own location.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"config file does not exist: {config_path}")
    if not config_path.is_file():
        raise ConfigurationError(f"config file is not a regular file: {config_path}")
    try:
        payload = load_yaml(config_path)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"config file {config_path} is not valid YAML: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"config file {config_path}: root must be mapping")
    validate_payload(payload, str(config_path))
    config = Configuration.from_roots(
        payload["code-path"],
        payload["docs-path"],
        base_dir=base_dir,
        fragments_dir=payload.get("fragments-dir"),
        analytics_dir=payload.get("analytics-dir"),
        code_includes=payload.get("code-includes"),
        code_excludes=payload.get("code-excludes"),
        doc_includes=payload.get("doc-includes"),
        doc_excludes=payload.get("doc-excludes"),
        separator=payload.get("separator"),
    )
    return require_roots(config)
