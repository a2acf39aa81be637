"""
Shared test fixtures for trello-cli tests.
Patches config module to avoid loading a real .env and making API calls.
"""

import pytest

from trello_cli.config import Credentials


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from trello_cli import config

    monkeypatch.setattr(config, "env", {"TRELLO_KEY": "fake-key", "TRELLO_TOKEN": "fake-token"})
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 5_000_000)


@pytest.fixture
def credentials():
    return Credentials(key="fake-key", token="fake-token")
