# -*- coding: utf-8 -*-
"""
shulesms/shared/utils/json_response.py

JSON responses with an explicit UTF-8 charset.

Contact names extracted from uploads are not always ASCII; some clients
and proxies do not assume UTF-8 for JSON and show mojibake otherwise.

Usage:
    app = FastAPI(default_response_class=UTF8JSONResponse)

Author: ShuleSMS
Date: 2026-10-19
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse with Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


__all__ = ["UTF8JSONResponse"]
