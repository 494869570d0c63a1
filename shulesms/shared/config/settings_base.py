# -*- coding: utf-8 -*-
"""
shulesms/shared/config/settings_base.py

Base configuration (Pydantic v2) for ShuleSMS.
- This class does NOT instantiate singletons; config_loader does that.
- It is the base for settings_dev.py, settings_testing.py and settings_prod.py.

Author: ShuleSMS
Date: 2026-10-19
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Supported environments
EnvName = Literal["development", "test", "production"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Application core
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="ShuleSMS", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["plain", "pretty", "json"] = Field(
        default="plain", validation_alias="LOG_FORMAT"
    )

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def _security_checks(self) -> None:
        """Environment-specific validation; production overrides it."""

    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @property
    def cors_origins(self) -> list[str]:
        """CORS_ORIGINS as a list (comma separated in the environment)."""
        origins = (o.strip().strip('"').strip("'") for o in self.allowed_origins.split(","))
        return [o for o in origins if o]


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo shulesms/shared/config/settings_base.py
