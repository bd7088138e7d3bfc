"""Keep tests independent of the developer's environment and ledger files."""

from __future__ import annotations

import pytest

from piggy_core.io.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PIGGY_FILE", raising=False)
    monkeypatch.delenv("PIGGY_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
