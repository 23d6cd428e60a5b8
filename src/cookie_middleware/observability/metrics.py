"""Prometheus metrics for the cookie middleware.

Metrics include:

- Cookies parsed from ``Cookie`` request headers
- Parse errors, whether fatal or skipped
- ``Set-Cookie`` headers emitted, by delta kind
- Records dropped because they could not be encoded

Examples:
    Recording an emitted removal::

        from cookie_middleware.observability.metrics import record_set_cookie

        record_set_cookie(kind="REMOVED")
"""

from prometheus_client import Counter

# Cookies successfully parsed from request headers
cookies_parsed_total = Counter(
    "cookie_parsed_total",
    "Total number of cookies parsed from Cookie request headers",
)

# Parse failures
# Labels: outcome (fatal, skipped)
parse_errors_total = Counter(
    "cookie_parse_errors_total",
    "Total number of malformed Cookie header values or pairs",
    ["outcome"],
)

# Set-Cookie headers emitted
# Labels: kind (ADDED, OVERWRITTEN, REMOVED)
set_cookie_headers_total = Counter(
    "cookie_set_headers_total",
    "Total number of Set-Cookie headers emitted",
    ["kind"],
)

encode_failures_total = Counter(
    "cookie_encode_failures_total",
    "Total number of cookie records that could not be encoded",
)


def record_cookies_parsed(count: int) -> None:
    """Record cookies parsed from one request.

    Args:
        count: Number of cookie pairs parsed

    Examples:
        >>> record_cookies_parsed(3)
    """
    if count:
        cookies_parsed_total.inc(count)


def record_parse_error(fatal: bool) -> None:
    """Record a malformed header value or pair.

    Args:
        fatal: True if the error aborted parsing, False if it was skipped
    """
    parse_errors_total.labels(outcome="fatal" if fatal else "skipped").inc()


def record_set_cookie(kind: str) -> None:
    """Record an emitted Set-Cookie header.

    Args:
        kind: The delta kind (ADDED, OVERWRITTEN, REMOVED)
    """
    set_cookie_headers_total.labels(kind=kind).inc()


def record_encode_failure() -> None:
    """Record a cookie record that failed to encode."""
    encode_failures_total.inc()
