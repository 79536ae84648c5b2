import pytest


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch):
    """tests run with the default settings whatever the calling environment"""
    monkeypatch.delenv("GAMMAFN_SETTINGS", raising=False)
    monkeypatch.delenv("GAMMAFN_WARNINGS", raising=False)
