# -*- coding: utf-8 -*-
"""
shulesms/shared/config/settings_testing.py

Overrides for the TEST environment. Deterministic and quiet.

Author: ShuleSMS
Date: 2026-10-19
"""

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Environment identity ---
    python_env: str = "test"

    # --- Less noise in tests ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
