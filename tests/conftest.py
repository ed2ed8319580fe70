"""
Pytest configuration and shared fixtures for httpie-lite tests.

This conftest.py:
1. Adds src/ to sys.path so tests run without an editable install
2. Provides fake transports and response factories
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_SRC_ROOT = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from core.domain.models import HttpResponse  # noqa: E402


# =============================================================================
# Fixtures
# =============================================================================


class RecordingTransport:
    """HttpTransport fake: records every call and returns a canned response."""

    def __init__(self, response: HttpResponse | None = None) -> None:
        self.calls: list[tuple[str, str, object]] = []
        self.response = response or HttpResponse(status_code=200, reason_phrase="OK")

    async def send(self, method, url, *, json=None):
        self.calls.append((method, url, json))
        return self.response


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep HTTPIE_LITE_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("HTTPIE_LITE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
