"""
Test configuration — ensures repo root is in sys.path + isolates configuration.

This allows tests to import from top-level packages (planlayout, cli).
Every test starts from the default layout config with no PLANLAYOUT_*
environment overrides.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import planlayout.*, cli.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from planlayout.config import reset_config  # noqa: E402
from planlayout.models import PlanItem  # noqa: E402

_ENV_VARS = (
    "PLANLAYOUT_CONFIG",
    "PLANLAYOUT_DEFAULT_DURATION",
    "PLANLAYOUT_STRICT_INVARIANTS",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Drop env overrides and the cached config around every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_item():
    """Factory: make_item("a", 0, 30) -> PlanItem spanning [0, 30)."""

    def _make(item_id: str, start: int, end: int | None = None, **kwargs) -> PlanItem:
        return PlanItem(id=item_id, start_minutes=start, end_minutes=end, **kwargs)

    return _make
