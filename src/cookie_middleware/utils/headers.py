"""Header access utilities for the cookie middleware.

This module provides functions for:
- Reading every value of a header, case-insensitively, from the header
  containers found in Python web stacks
- Decoding raw header values into header-safe text
"""

from collections.abc import Iterable, Mapping
from typing import Any

from cookie_middleware.exceptions import CookieParseError

COOKIE_HEADER = "cookie"
SET_COOKIE_HEADER = "set-cookie"


def get_all_header_values(headers: Any, header_name: str) -> list[str | bytes]:
    """Get every value of a header with case-insensitive lookup.

    Supported containers:
    - objects with ``getlist`` (Starlette ``Headers``), which already fold
      case and keep repeated values
    - mappings of header name to a single value
    - iterables of ``(name, value)`` pairs, including ASGI raw headers
      where both items are bytes

    Args:
        headers: The header container.
        header_name: Name of the header to collect.

    Returns:
        The values in the order the container presents them. Empty if the
        header is absent.

    Example:
        >>> get_all_header_values([(b"cookie", b"a=1"), (b"Cookie", b"b=2")], "Cookie")
        [b'a=1', b'b=2']
        >>> get_all_header_values({"Content-Type": "text/html"}, "cookie")
        []
    """
    if headers is None:
        return []

    if hasattr(headers, "getlist"):
        return list(headers.getlist(header_name))

    header_name_lower = header_name.lower()
    pairs: Iterable[tuple[Any, Any]] = (
        headers.items() if isinstance(headers, Mapping) else headers
    )

    values: list[str | bytes] = []
    for key, value in pairs:
        if isinstance(key, (bytes, bytearray)):
            key = bytes(key).decode("latin-1")
        if key.lower() == header_name_lower:
            values.append(value)

    return values


def decode_header_value(value: str | bytes) -> str:
    """Decode a raw header value into header-safe text.

    Bytes are decoded as Latin-1. The result must consist only of visible
    ASCII characters, spaces and horizontal tabs.

    Args:
        value: The raw header value.

    Returns:
        The header value as text.

    Raises:
        CookieParseError: If the value contains any other character.

    Example:
        >>> decode_header_value(b"a=1; b=2")
        'a=1; b=2'
    """
    text = bytes(value).decode("latin-1") if isinstance(value, (bytes, bytearray)) else value

    for char in text:
        if char != "\t" and not (" " <= char <= "~"):
            raise CookieParseError(
                f"failed to convert header to a str: invalid character {char!r}"
            )

    return text
