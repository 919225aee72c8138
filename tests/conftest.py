"""Shared pytest fixtures."""

import pytest

from bistro import config as config_module


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test with a fresh global config and no BISTRO_ overrides."""
    for var in (
        "BISTRO_DEMO_RESTAURANT_NAME",
        "BISTRO_DEMO_RESTAURANT_LOCATION",
        "BISTRO_DEMO_OPENING_TIME",
        "BISTRO_DEMO_CLOSING_TIME",
        "BISTRO_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config_module, "config", None)
    yield
