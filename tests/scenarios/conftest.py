"""Shared FastAPI application for scenario tests."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from cookie_middleware.adapters.asgi import CookieMiddleware, get_cookie_store
from cookie_middleware.config import CookieConfig
from cookie_middleware.core.store import CookieStore
from cookie_middleware.models import CookieRecord


def create_app(config: CookieConfig | None = None) -> FastAPI:
    """Create a FastAPI app exposing the cookie store over HTTP."""
    app = FastAPI()
    app.add_middleware(CookieMiddleware, config=config)

    @app.get("/cookies")
    async def read_cookies(cookies: CookieStore = Depends(get_cookie_store)):
        return {record.name: record.value for record in cookies}

    @app.post("/cookies/{name}")
    async def set_cookie(
        name: str,
        value: str,
        path: str | None = None,
        cookies: CookieStore = Depends(get_cookie_store),
    ):
        cookies.add(CookieRecord(name=name, value=value, path=path))
        return {record.name: record.value for record in cookies}

    @app.delete("/cookies/{name}")
    async def delete_cookie(name: str, cookies: CookieStore = Depends(get_cookie_store)):
        cookies.remove(name)
        return {record.name: record.value for record in cookies}

    return app


@pytest.fixture
def client() -> TestClient:
    """Create a client for an app with the default configuration."""
    return TestClient(create_app())


@pytest.fixture
def lenient_client() -> TestClient:
    """Create a client for an app that ignores unparseable cookies."""
    return TestClient(create_app(CookieConfig(on_parse_error="ignore")))
