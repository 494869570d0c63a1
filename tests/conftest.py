# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Global test configuration for ShuleSMS.

- Puts the repository root on sys.path (tests run without installing).
- Forces the test environment before the app is imported.
- Async HTTP client against the FastAPI app (httpx ASGITransport + asgi-lifespan).
"""

import os
import pathlib
import sys
from collections.abc import AsyncIterator

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

# -----------------------------------------------------------------------------
# 1) Minimal environment
# -----------------------------------------------------------------------------
os.environ.setdefault("PYTHON_ENV", "test")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:5173")

# -----------------------------------------------------------------------------
# 2) Repository root on sys.path
# -----------------------------------------------------------------------------
REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
assert (REPO_ROOT / "shulesms").exists(), f"'shulesms' not found in {REPO_ROOT}"


# -----------------------------------------------------------------------------
# 3) FastAPI app and async client
# -----------------------------------------------------------------------------
@pytest.fixture(scope="session")
def app():
    """
    Loads the FastAPI application **after** the environment is set.
    """
    from shulesms.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    """
    Async HTTP client against the app, startup/shutdown handled by asgi-lifespan.
    """
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
# Fin del archivo tests/conftest.py
