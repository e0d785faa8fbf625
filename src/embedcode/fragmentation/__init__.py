"""Cut code files into named fragment artifacts."""

from __future__ import annotations

from .artifacts import artifact_path, read_artifact
from .fragmenter import FragmentationReport, FragmentationResult, Fragmenter, fragmentize_all
from .model import DEFAULT_FRAGMENT, Fragment, Partition

__all__ = [
    "DEFAULT_FRAGMENT",
    "Fragment",
    "FragmentationReport",
    "FragmentationResult",
    "Fragmenter",
    "Partition",
    "artifact_path",
    "fragmentize_all",
    "read_artifact",
]
