# -*- coding: utf-8 -*-
"""
shulesms/shared/config/logging_config.py

Centralized logging configuration for ShuleSMS.

Formats:
- plain:  one line per record, for development consoles
- pretty: plain with aligned level names, easier to scan while debugging
- json:   python-json-logger records for production log shipping

Third-party libraries used by the extraction pipeline (Pillow, the multipart
parser) log every decoded chunk at DEBUG; they are capped at WARNING so a
DEBUG root level stays readable.

Author: ShuleSMS
Date: 2026-10-19
"""

import logging.config
from typing import Literal

NOISY_LOGGERS = ("PIL", "multipart", "python_multipart", "charset_normalizer")


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain"
) -> None:
    """
    Configures application logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Output format (plain, pretty, json)

    Examples:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    formatters = {
        "plain": {
            "format": "%(asctime)s - %(levelname)s [%(name)s]: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "pretty": {
            "format": "%(asctime)s | %(levelname)-8s | %(name)-48s | %(message)s",
            "datefmt": "%H:%M:%S",
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": fmt if fmt in formatters else "plain",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {name: {"level": "WARNING"} for name in NOISY_LOGGERS},
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    })


__all__ = ["setup_logging"]
# Fin del archivo shulesms/shared/config/logging_config.py
