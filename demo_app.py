"""Demo FastAPI application with the cookie middleware.

This application demonstrates cookie reading and delta emission.
Run with: python demo_app.py
Then test with:
    curl -i -X POST localhost:8000/login
    curl -i -H 'Cookie: session=s-1; theme=dark' localhost:8000/preferences?theme=light
    curl -i -X POST -H 'Cookie: session=s-1' localhost:8000/logout
"""

import uuid

import uvicorn
from fastapi import Depends, FastAPI
from pydantic import BaseModel

from cookie_middleware.adapters.asgi import CookieMiddleware, get_cookie_store
from cookie_middleware.config import CookieConfig
from cookie_middleware.core.store import CookieStore
from cookie_middleware.models import CookieRecord, SameSite
from cookie_middleware.observability.logging import configure_logging

configure_logging(level="DEBUG", json_output=False)

app = FastAPI(
    title="Cookie Middleware Demo",
    description="Demo API showing Set-Cookie delta handling",
    version="0.1.0",
)

app.add_middleware(
    CookieMiddleware,
    config=CookieConfig(on_parse_error="reject"),
)


class CookieView(BaseModel):
    name: str
    value: str


@app.get("/cookies")
async def list_cookies(cookies: CookieStore = Depends(get_cookie_store)) -> list[CookieView]:
    """Echo the cookies the client sent."""
    return [CookieView(name=record.name, value=record.value) for record in cookies]


@app.post("/login")
async def login(cookies: CookieStore = Depends(get_cookie_store)) -> dict[str, str]:
    """Issue a session cookie."""
    session_id = f"s-{uuid.uuid4().hex[:8]}"
    cookies.add(
        CookieRecord(
            name="session",
            value=session_id,
            path="/",
            http_only=True,
            same_site=SameSite.LAX,
        )
    )
    return {"session": session_id}


@app.get("/preferences")
async def preferences(
    theme: str | None = None,
    cookies: CookieStore = Depends(get_cookie_store),
) -> dict[str, str | None]:
    """Read the theme cookie, and overwrite it when a new theme is given."""
    if theme is not None:
        cookies.add(CookieRecord(name="theme", value=theme, path="/"))
    current = cookies.get("theme")
    return {"theme": current.value if current else None}


@app.post("/logout")
async def logout(cookies: CookieStore = Depends(get_cookie_store)) -> dict[str, str]:
    """Clear the session cookie."""
    cookies.remove(CookieRecord(name="session", path="/"))
    return {"status": "logged out"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
