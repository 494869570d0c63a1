# -*- coding: utf-8 -*-
"""
shulesms/main.py

Main entry point of the ShuleSMS contacts backend.

- .env loaded before settings are built
- Logging configured once from LOG_LEVEL / LOG_FORMAT
- Tesseract binary path (CONTACTS_TESSERACT_CMD) applied once
- CORS from CORS_ORIGINS
- /health and /api/contacts/* routers

Run:
    uvicorn shulesms.main:app --reload

Author: ShuleSMS
Date: 2026-10-19
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env BEFORE anything reads the environment.
# Outside production .env wins over the process environment.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV != "production")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shulesms.modules.contacts.config import get_contacts_config
from shulesms.modules.contacts.converters.ocr import configure_tesseract
from shulesms.routes import router as api_router
from shulesms.shared.config import get_settings, setup_logging
from shulesms.shared.utils.json_response import UTF8JSONResponse

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    configure_tesseract(get_contacts_config().tesseract_cmd)

    application = FastAPI(
        title=settings.app_name,
        description="Contact extraction for school SMS campaigns",
        version=settings.app_version,
        default_response_class=UTF8JSONResponse,
    )

    origins = settings.cors_origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials are not allowed together with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(api_router)

    logger.info(
        "[startup] %s %s ready (env=%s, cors=%s)",
        settings.app_name,
        settings.app_version,
        settings.python_env,
        origins,
    )
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("shulesms.main:app", host=_settings.app_host, port=_settings.app_port, reload=_settings.debug)

# Fin del archivo shulesms/main.py
