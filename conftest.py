"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and gabridge/), so fixtures are shared
by the centralized tests AND the adapter tests colocated with their code.
"""

import os

import pytest

from gabridge.adapters.backend.fake import FakeBackend
from gabridge.core.config import GoogleAnalyticsSettings
from gabridge.core.factory import create_tracker
from gabridge.core.protocols.backend import BackendKind
from gabridge.core.service import GoogleAnalyticsTracker


@pytest.fixture(autouse=True)
def _clean_ga_env(monkeypatch):
    """Keep real GA_* env vars from leaking into settings built by tests."""
    for name in list(os.environ):
        if name.startswith("GA_"):
            monkeypatch.delenv(name)


# ---------------------------------------------------------------------------
# Settings and backends
# ---------------------------------------------------------------------------


@pytest.fixture
def ga_settings():
    """Fresh settings with schema defaults."""
    return GoogleAnalyticsSettings()


@pytest.fixture
def fake_backend():
    """Fake Universal backend that records dispatched commands."""
    return FakeBackend()


@pytest.fixture
def fake_classic_backend():
    """Fake Classic backend that records dispatched commands."""
    return FakeBackend(kind=BackendKind.CLASSIC)


@pytest.fixture
def gaq():
    """Classic command queue as the ga.js snippet leaves it."""
    return []


# ---------------------------------------------------------------------------
# Trackers
# ---------------------------------------------------------------------------


@pytest.fixture
def tracker(fake_backend, ga_settings):
    """Tracker on a fake Universal backend."""
    return GoogleAnalyticsTracker(fake_backend, ga_settings)


@pytest.fixture
def classic_tracker(gaq, ga_settings):
    """Tracker detected from a host that only has the Classic queue."""
    return create_tracker({"_gaq": gaq}, settings=ga_settings)
