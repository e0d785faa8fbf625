"""Run configuration: defaults, YAML config files and CLI argument validation."""

from __future__ import annotations

from .configuration import Configuration
from .loader import load_config_file

__all__ = ["Configuration", "load_config_file"]
