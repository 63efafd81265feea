"""Root conftest — shared test configuration.

Invariants:
    - Every test starts with a fresh Settings instance (get_settings cache cleared)
    - DRILLS_* variables from the developer shell never leak into tests
"""

import os

import pytest

from drills.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("DRILLS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
