"""Pytest fixtures for orrery tests."""

import pytest

from orrery import earth
from orrery.clock import Clock


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep ORRERY_* variables and any local .env file out of every test."""
    for name in ("ORRERY_BODY", "ORRERY_STYLE", "ORRERY_LONGITUDE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("orrery.config.load_dotenv", lambda *args, **kwargs: False)
    yield


@pytest.fixture
def earth_clock():
    """Earth clock whose wall clock is frozen at the Unix epoch."""
    return Clock(earth, time_source=lambda: 0)
