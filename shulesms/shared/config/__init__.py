# -*- coding: utf-8 -*-
"""
shulesms/shared/config/__init__.py

Single access point to configuration:
    from shulesms.shared.config import get_settings, setup_logging

Settings are built lazily on first access so that importing a module never
triggers validation (tests set PYTHON_ENV before the first call).
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings

__all__ = ["get_settings", "setup_logging", "BaseAppSettings"]
