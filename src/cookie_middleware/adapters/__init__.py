"""Framework adapters for the cookie middleware.

- asgi.py: ASGI middleware for FastAPI, Starlette, etc.

The adapters extract cookies from framework request objects and write the
resulting ``Set-Cookie`` headers onto framework responses.
"""

from cookie_middleware.adapters.asgi import CookieMiddleware, get_cookie_store

__all__ = ["CookieMiddleware", "get_cookie_store"]
