# -*- coding: utf-8 -*-
"""
shulesms/shared/config/settings_prod.py

Overrides for the PRODUCTION environment: JSON logs, no wildcard CORS.

Author: ShuleSMS
Date: 2026-10-19
"""

from .settings_base import BaseAppSettings


class ProdSettings(BaseAppSettings):
    """Configuration for production."""

    python_env: str = "production"

    log_level: str = "INFO"
    log_format: str = "json"

    def _security_checks(self) -> None:
        """Rejects configurations that are unsafe to run in production."""
        if self.debug:
            raise ValueError("DEBUG must be disabled in production")
        if "*" in self.cors_origins:
            raise ValueError("CORS_ORIGINS must list explicit origins in production")
