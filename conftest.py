"""
Root conftest.py — isolates tests from URLPICK_* settings and registers markers.

Markers:
  @pytest.mark.timing — depends on real debounce timers; skipped with --skip-timing
                        or SKIP_TIMING_TESTS=1
"""
from __future__ import annotations

import os

import pytest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_urlpick_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop URLPICK_* variables so Config.from_env() sees only what a test sets."""
    for key in list(os.environ):
        if key.startswith("URLPICK_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "timing: mark test as relying on real debounce timers (skip with --skip-timing or SKIP_TIMING_TESTS=1)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--skip-timing",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.timing",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.timing tests when --skip-timing or SKIP_TIMING_TESTS=1 is set."""
    skip = config.getoption("--skip-timing") or os.environ.get("SKIP_TIMING_TESTS", "").lower() in ("1", "true", "yes")
    if not skip:
        return
    skip_timing = pytest.mark.skip(reason="Timer-based test — skipped by --skip-timing or SKIP_TIMING_TESTS=1")
    for item in items:
        if "timing" in item.keywords:
            item.add_marker(skip_timing)
