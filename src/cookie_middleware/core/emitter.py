"""Emission of a cookie store's delta as ``Set-Cookie`` headers.

This is the response-side boundary of the middleware:
1. Ask the store for its delta (added, overwritten and removed cookies)
2. Encode each entry with the codec
3. Append each encoded value to the outbound header sink

A record that cannot be encoded is skipped, logged and counted, so that one
bad cookie never prevents the rest of the delta from being sent. Set
``CookieConfig(strict_encoding=True)`` to raise CookieEncodeError instead.

Examples:
    Appending to Starlette response headers::

        from cookie_middleware.core.emitter import emit_set_cookie_headers

        response = Response("ok")
        emit_set_cookie_headers(store, response.headers)

    Collecting the encoded values::

        from cookie_middleware.core.emitter import encode_delta

        encode_delta(store)
        # ["theme=light", "session=; Max-Age=0; Expires=..."]
"""

from typing import Protocol

from cookie_middleware.codec import CookieCodec, PercentEncodedCodec
from cookie_middleware.config import CookieConfig
from cookie_middleware.core.store import CookieStore
from cookie_middleware.exceptions import CookieEncodeError
from cookie_middleware.models import DeltaKind
from cookie_middleware.observability.logging import get_logger
from cookie_middleware.observability.metrics import record_encode_failure, record_set_cookie
from cookie_middleware.utils.headers import SET_COOKIE_HEADER

logger = get_logger(__name__)


class HeaderSink(Protocol):
    """Anything outbound headers can be appended to.

    Starlette's ``MutableHeaders`` satisfies this protocol.
    """

    def append(self, key: str, value: str) -> None: ...


def encode_delta(
    store: CookieStore,
    codec: CookieCodec | None = None,
    config: CookieConfig | None = None,
) -> list[tuple[DeltaKind, str]]:
    """Encode every delta entry of a store.

    Args:
        store: The store whose changes are sent.
        codec: Codec used to encode records (PercentEncodedCodec by default).
        config: Emission policy.

    Returns:
        ``(kind, header_value)`` pairs in delta order, minus any records
        skipped because they could not be encoded.

    Raises:
        CookieEncodeError: If a record cannot be encoded and
            ``config.strict_encoding`` is True.
    """
    codec = codec or PercentEncodedCodec()
    config = config or CookieConfig()

    encoded: list[tuple[DeltaKind, str]] = []
    for entry in store.delta():
        try:
            value = codec.encode(entry.record)
        except CookieEncodeError as e:
            record_encode_failure()
            if config.strict_encoding:
                raise
            logger.warning(
                "cookie.encode_skipped",
                cookie=e.name,
                kind=entry.kind.value,
                error=e.message,
            )
            continue
        encoded.append((entry.kind, value))

    return encoded


def emit_set_cookie_headers(
    store: CookieStore,
    sink: HeaderSink,
    codec: CookieCodec | None = None,
    config: CookieConfig | None = None,
) -> int:
    """Append the store's delta to ``sink`` as ``Set-Cookie`` headers.

    Args:
        store: The store whose changes are sent.
        sink: Outbound headers supporting ``append(name, value)``.
        codec: Codec used to encode records.
        config: Emission policy.

    Returns:
        Number of headers appended.

    Raises:
        CookieEncodeError: Only when ``config.strict_encoding`` is True.
    """
    encoded = encode_delta(store, codec=codec, config=config)
    for kind, value in encoded:
        sink.append(SET_COOKIE_HEADER, value)
        record_set_cookie(kind.value)

    return len(encoded)
