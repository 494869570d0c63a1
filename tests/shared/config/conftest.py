# -*- coding: utf-8 -*-
import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Isolates environment variables and clears the get_settings() cache per test.
    """
    # Do not inherit PYTHON_ENV or app settings from the developer shell
    for k in list(os.environ.keys()):
        if k.startswith(("APP_", "CORS_", "LOG_", "CONTACTS_")) or k == "DEBUG":
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")

    from shulesms.shared.config.config_loader import get_settings
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
# Fin del archivo tests/shared/config/conftest.py
