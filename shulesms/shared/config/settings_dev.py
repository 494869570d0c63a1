# -*- coding: utf-8 -*-
"""
shulesms/shared/config/settings_dev.py

Overrides for the DEVELOPMENT environment.

Author: ShuleSMS
Date: 2026-10-19
"""

from .settings_base import BaseAppSettings


class DevSettings(BaseAppSettings):
    """Configuration for local development."""

    python_env: str = "development"

    # Logging
    log_level: str = "DEBUG"
    log_format: str = "plain"  # readable console output
