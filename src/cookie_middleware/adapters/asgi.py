"""ASGI middleware adapter for FastAPI and Starlette applications.

The middleware:
1. Parses the request's ``Cookie`` headers into a CookieStore
2. Exposes the store to handlers as ``request.state.cookies``
3. Appends the store's delta to the response as ``Set-Cookie`` headers

Examples:
    FastAPI integration::

        from fastapi import Depends, FastAPI
        from cookie_middleware.adapters.asgi import CookieMiddleware, get_cookie_store
        from cookie_middleware.core.store import CookieStore
        from cookie_middleware.models import CookieRecord

        app = FastAPI()
        app.add_middleware(CookieMiddleware)

        @app.post("/login")
        async def login(cookies: CookieStore = Depends(get_cookie_store)):
            cookies.add(CookieRecord(name="session", value="abc", http_only=True))
            return {"status": "ok"}

    Starlette integration::

        from starlette.applications import Starlette
        from starlette.middleware import Middleware

        middleware = [
            Middleware(CookieMiddleware, config=CookieConfig(on_parse_error="ignore")),
        ]

        app = Starlette(middleware=middleware)
"""

from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from cookie_middleware.codec import CookieCodec, PercentEncodedCodec
from cookie_middleware.config import CookieConfig
from cookie_middleware.core.emitter import emit_set_cookie_headers
from cookie_middleware.core.store import CookieStore
from cookie_middleware.exceptions import CookieParseError
from cookie_middleware.observability.logging import get_logger

logger = get_logger(__name__)

STATE_ATTRIBUTE = "cookies"


class CookieMiddleware(BaseHTTPMiddleware):
    """ASGI middleware managing a CookieStore per request.

    Attributes:
        config: Configuration object
        codec: Codec used for parsing and encoding cookies
    """

    def __init__(
        self,
        app: Any,
        config: CookieConfig | None = None,
        codec: CookieCodec | None = None,
    ) -> None:
        """Initialize the ASGI middleware.

        Args:
            app: The ASGI application
            config: Configuration object (uses defaults if not provided)
            codec: Cookie codec (PercentEncodedCodec if not provided)
        """
        super().__init__(app)
        self.config = config or CookieConfig()
        self.codec = codec or PercentEncodedCodec()

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Parse cookies, run the handler, then emit the cookie delta.

        Args:
            request: The Starlette request object
            call_next: Function to call the next middleware/handler

        Returns:
            The handler's response with ``Set-Cookie`` headers appended, or
            400 Bad Request if the cookies cannot be parsed and the
            configuration says to reject them.
        """
        try:
            store = CookieStore.from_headers(request.headers, codec=self.codec, config=self.config)
        except CookieParseError as e:
            logger.warning(
                "cookie.parse_failed",
                path=request.url.path,
                policy=self.config.on_parse_error,
                error=e.message,
            )
            if self.config.on_parse_error == "reject":
                return PlainTextResponse(e.message, status_code=400)
            store = CookieStore()

        setattr(request.state, STATE_ATTRIBUTE, store)

        response = await call_next(request)

        emitted = emit_set_cookie_headers(
            store,
            response.headers,
            codec=self.codec,
            config=self.config,
        )
        if emitted:
            logger.debug("cookie.delta_emitted", path=request.url.path, count=emitted)

        return response


def get_cookie_store(request: Request) -> CookieStore:
    """Return the CookieStore the middleware attached to ``request``.

    Usable directly or as a FastAPI dependency.

    Raises:
        RuntimeError: If CookieMiddleware is not installed.
    """
    store = getattr(request.state, STATE_ATTRIBUTE, None)
    if store is None:
        raise RuntimeError("CookieMiddleware is not installed for this application")
    return store
