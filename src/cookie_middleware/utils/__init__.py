"""Utility modules for the cookie middleware."""

from .headers import (
    COOKIE_HEADER,
    SET_COOKIE_HEADER,
    decode_header_value,
    get_all_header_values,
)

__all__ = [
    "get_all_header_values",
    "decode_header_value",
    "COOKIE_HEADER",
    "SET_COOKIE_HEADER",
]
