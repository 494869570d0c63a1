# -*- coding: utf-8 -*-
"""
shulesms/routes

Routers mounted by the application.
"""

from fastapi import APIRouter

from shulesms.modules.contacts.routes import router as contacts_router
from .health_routes import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(contacts_router)

__all__ = ["router"]
