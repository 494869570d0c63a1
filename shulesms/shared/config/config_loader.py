# -*- coding: utf-8 -*-
"""
shulesms/shared/config/config_loader.py

Builds the settings object for PYTHON_ENV once per process.
Unknown environments fall back to development.

Author: ShuleSMS
Date: 2026-10-19
"""

from functools import lru_cache
import os

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_testing import EnvTestingSettings
from .settings_prod import ProdSettings

SETTINGS_BY_ENV: dict[str, type[BaseAppSettings]] = {
    "development": DevSettings,
    "test": EnvTestingSettings,
    "production": ProdSettings,
}


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Cached settings for the current PYTHON_ENV.

    Raises:
        ValueError: if the environment's safety checks reject the values
    """
    env = os.getenv("PYTHON_ENV", "development").strip().lower()
    settings = SETTINGS_BY_ENV.get(env, DevSettings)()
    settings._security_checks()
    return settings


__all__ = ["SETTINGS_BY_ENV", "get_settings"]
