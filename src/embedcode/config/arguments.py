from __future__ import annotations

import argparse
from pathlib import Path

from ..errors import ConfigurationError
from .configuration import Configuration
from .loader import load_config_file, require_roots

MODES = ("embed", "check", "analyze")

# CLI destinations that may only be combined with explicit roots.
OPTIONAL_SETTINGS = (
    "code_includes",
    "code_excludes",
    "doc_includes",
    "doc_excludes",
    "fragments_dir",
    "separator",
    "analytics_dir",
)


def _flag(dest: str) -> str:
    return "--" + dest.replace("_", "-")


def validate_arguments(args: argparse.Namespace) -> None:
    mode = getattr(args, "mode", None)
    if not mode:
        raise ConfigurationError("mode must be set")
    if mode not in MODES:
        raise ConfigurationError(f"invalid value for mode: {mode!r} (expected one of {', '.join(MODES)})")

    code_path = getattr(args, "code_path", None)
    docs_path = getattr(args, "docs_path", None)
    config_file = getattr(args, "config_file_path", None)
    roots_set = bool(code_path) or bool(docs_path)

    if config_file:
        if roots_set:
            raise ConfigurationError("config file path cannot be set when code-path or docs-path are set")
        given = [_flag(dest) for dest in OPTIONAL_SETTINGS if getattr(args, dest, None) is not None]
        if given:
            raise ConfigurationError(f"config file path cannot be combined with {', '.join(given)}")
        return
    if roots_set and not (code_path and docs_path):
        raise ConfigurationError("code-path and docs-path must both be set")
    if not roots_set:
        raise ConfigurationError("either config-file-path or both code-path and docs-path must be set")


def build_configuration(args: argparse.Namespace, base_dir: Path | None = None) -> Configuration:
    validate_arguments(args)
    if args.config_file_path:
        base = base_dir or Path.cwd()
        config_path = Path(args.config_file_path)
        if not config_path.is_absolute():
            config_path = base / config_path
        return load_config_file(config_path, base_dir=base)
    config = Configuration.from_roots(
        args.code_path,
        args.docs_path,
        base_dir=base_dir,
        fragments_dir=args.fragments_dir,
        analytics_dir=args.analytics_dir,
        code_includes=args.code_includes,
        code_excludes=args.code_excludes,
        doc_includes=args.doc_includes,
        doc_excludes=args.doc_excludes,
        separator=args.separator,
    )
    return require_roots(config)
