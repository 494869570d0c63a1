# -*- coding: utf-8 -*-
"""
shulesms/routes/health_routes.py

Basic health check endpoint.

Author: ShuleSMS
Date: 2026-10-19
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from shulesms.shared.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Backend health check")
async def health_check() -> dict:
    settings = get_settings()

    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo shulesms/routes/health_routes.py
