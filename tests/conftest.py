from __future__ import annotations

import shutil
import socket
from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from embedcode.config.configuration import Configuration

from tests.helpers import RESOURCES

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / "build/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("embed-code", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB))
settings.load_profile("embed-code")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A writable copy of the sample code and documentation trees."""
    shutil.copytree(RESOURCES / "code", tmp_path / "code")
    shutil.copytree(RESOURCES / "docs", tmp_path / "docs")
    return tmp_path


@pytest.fixture
def config(workspace: Path) -> Configuration:
    return Configuration.from_roots(
        workspace / "code",
        workspace / "docs",
        fragments_dir=workspace / "build/fragments",
        analytics_dir=workspace / "build/analytics",
    )
