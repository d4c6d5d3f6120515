"""Environment for tests under `tests/functional/`."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_log_path(log_path: Path) -> Path:
    """Keep the flight recorder out of the real per-user log directory."""
    return log_path
