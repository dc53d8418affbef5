"""Pytest configuration and fixtures.

Provides environment isolation so configuration resolution never picks up
the developer's ``.env``, ``VERDICT_*`` variables, or ``pyproject.toml``.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from tests.helpers import Recorder
from verdict.config import reset_config_cache

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests."""
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_verdict_env(monkeypatch, tmp_path):
    """Clear VERDICT_* variables and point config at an absent pyproject.

    The cached process default is reset around every test so settings never
    leak between tests.
    """
    for key in list(os.environ.keys()):
        if key.startswith("VERDICT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("VERDICT_PYPROJECT_PATH", str(tmp_path / "pyproject.toml"))
    reset_config_cache()
    yield
    reset_config_cache()


# =============================================================================
# Test Doubles
# =============================================================================


@pytest.fixture
def recorder() -> Recorder:
    """Return a fresh callback recorder."""
    return Recorder()
