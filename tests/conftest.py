"""Pytest configuration for Param Permuter."""

import os

import pytest

from param_permuter.core import config as config_module


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from PARAM_PERMUTER_* variables and cached settings."""
    for name in list(os.environ):
        if name.upper().startswith("PARAM_PERMUTER_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_settings", None)
    yield
    config_module._settings = None
