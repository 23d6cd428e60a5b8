"""Core cookie handling logic.

This package contains the request-to-response cookie flow:
- Parser: ``Cookie`` header values -> cookie records
- Store: original vs. current state and the delta between them
- Emitter: delta -> ``Set-Cookie`` header values
- Builder: chained construction of stores

The core logic is framework-agnostic and can be wrapped by adapters
for different web frameworks.
"""

from cookie_middleware.core.builder import CookieStoreBuilder
from cookie_middleware.core.emitter import emit_set_cookie_headers, encode_delta
from cookie_middleware.core.store import CookieStore

__all__ = ["CookieStore", "CookieStoreBuilder", "emit_set_cookie_headers", "encode_delta"]
