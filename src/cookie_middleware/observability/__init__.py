"""Observability utilities for the cookie middleware.

This package provides monitoring and debugging capabilities:
- Prometheus metrics for parsed cookies, parse errors and emitted headers
- Structured logging with contextual information
"""

from cookie_middleware.observability.logging import (
    add_event_component,
    configure_logging,
    get_logger,
)
from cookie_middleware.observability.metrics import (
    record_cookies_parsed,
    record_encode_failure,
    record_parse_error,
    record_set_cookie,
)

__all__ = [
    "add_event_component",
    "configure_logging",
    "get_logger",
    "record_cookies_parsed",
    "record_parse_error",
    "record_set_cookie",
    "record_encode_failure",
]
