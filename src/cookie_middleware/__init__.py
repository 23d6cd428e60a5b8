"""Cookie middleware for Python web applications.

This package parses ``Cookie`` request headers into a store that remembers
what the client sent, lets the application add, overwrite and remove
cookies, and writes back only the resulting changes as ``Set-Cookie``
response headers.
"""

from cookie_middleware.codec import CookieCodec, PercentEncodedCodec
from cookie_middleware.config import CookieConfig
from cookie_middleware.core import CookieStore, CookieStoreBuilder, emit_set_cookie_headers
from cookie_middleware.exceptions import CookieEncodeError, CookieError, CookieParseError
from cookie_middleware.models import CookieRecord, DeltaEntry, DeltaKind, SameSite

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CookieCodec",
    "CookieConfig",
    "CookieEncodeError",
    "CookieError",
    "CookieParseError",
    "CookieRecord",
    "CookieStore",
    "CookieStoreBuilder",
    "DeltaEntry",
    "DeltaKind",
    "PercentEncodedCodec",
    "SameSite",
    "emit_set_cookie_headers",
]
