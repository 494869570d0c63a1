# -*- coding: utf-8 -*-
from .extraction_routes import router

__all__ = ["router"]
