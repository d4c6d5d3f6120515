"""Global pytest fixtures and default marks for UNITCRAFT."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers.fakes import FakeActor

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> marker applied to every test collected under it.
DIRECTORY_MARKERS = {
    "unit": "unit",
    "integration": "integration",
    "functional": "functional",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test after the top-level directory it lives in.

    Tests that already carry the marker explicitly are left alone.
    """
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        marker_name = DIRECTORY_MARKERS.get(top)
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def fake_actor() -> FakeActor:
    """A fresh hand-written actor double per test."""
    return FakeActor()


@pytest.fixture
def runner() -> CliRunner:
    """Click runner for invoking the CLI in-process."""
    return CliRunner()


@pytest.fixture
def log_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the flight recorder at a temporary file instead of the user log dir."""
    path = tmp_path / "unitcraft.log"
    monkeypatch.setenv("UNITCRAFT_LOG_PATH", str(path))
    return path
