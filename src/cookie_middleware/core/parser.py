"""Parsing of ``Cookie`` request headers into cookie records.

A request may carry several ``Cookie`` header lines, each holding one or
more ``name=value`` pairs separated by ``;``. This module walks them in the
order the transport presents them and yields one record per pair.

By default parsing is fail-fast: the first header value that is not
header-safe text, or the first malformed pair, raises CookieParseError and
no cookies are accepted for the request. With ``CookieConfig(fail_fast=False)``
malformed input is logged and skipped instead.

Examples:
    Parsing raw header values::

        from cookie_middleware.core.parser import cookies_from_header_values

        records = list(cookies_from_header_values(["a=1; b=2", "c=3"]))
        # [CookieRecord(name="a", ...), CookieRecord(name="b", ...), ...]
"""

from collections.abc import Iterable, Iterator
from typing import Any

from cookie_middleware.codec import CookieCodec, PercentEncodedCodec
from cookie_middleware.config import CookieConfig
from cookie_middleware.exceptions import CookieParseError
from cookie_middleware.models import CookieRecord
from cookie_middleware.observability.logging import get_logger
from cookie_middleware.observability.metrics import record_cookies_parsed, record_parse_error
from cookie_middleware.utils.headers import (
    COOKIE_HEADER,
    decode_header_value,
    get_all_header_values,
)

logger = get_logger(__name__)


def split_cookie_pairs(header_value: str) -> Iterator[str]:
    """Split a decoded ``Cookie`` header value into its pairs.

    Empty segments, such as the one after a trailing ``;``, are skipped.

    Examples:
        >>> list(split_cookie_pairs("a=1; b=2;"))
        ['a=1', ' b=2']
    """
    for segment in header_value.split(";"):
        if segment.strip():
            yield segment


def cookies_from_header_values(
    values: Iterable[str | bytes],
    codec: CookieCodec | None = None,
    config: CookieConfig | None = None,
) -> Iterator[CookieRecord]:
    """Parse raw ``Cookie`` header values into cookie records.

    Args:
        values: Raw header values in transport order.
        codec: Codec used to parse each pair (PercentEncodedCodec by default).
        config: Parsing policy (defaults apply if not provided).

    Yields:
        One record per successfully parsed pair, in order of appearance.

    Raises:
        CookieParseError: On the first malformed value or pair when
            ``config.fail_fast`` is True, or when there are more header
            values than ``config.max_header_values``.
    """
    codec = codec or PercentEncodedCodec()
    config = config or CookieConfig()

    values = list(values)
    if len(values) > config.max_header_values:
        record_parse_error(fatal=True)
        raise CookieParseError(
            f"too many header values: {len(values)} exceeds {config.max_header_values}"
        )

    parsed = 0
    for raw in values:
        try:
            text = decode_header_value(raw)
        except CookieParseError as e:
            _handle_parse_error(e, config)
            continue

        for pair in split_cookie_pairs(text):
            try:
                record = codec.parse(pair)
            except CookieParseError as e:
                _handle_parse_error(e, config)
                continue
            parsed += 1
            yield record

    record_cookies_parsed(parsed)


def cookies_from_headers(
    headers: Any,
    codec: CookieCodec | None = None,
    config: CookieConfig | None = None,
) -> Iterator[CookieRecord]:
    """Parse every ``Cookie`` header found in a header container.

    Args:
        headers: Any container accepted by ``get_all_header_values``.
        codec: Codec used to parse each pair.
        config: Parsing policy.

    Yields:
        Parsed cookie records.

    Raises:
        CookieParseError: See ``cookies_from_header_values``.
    """
    yield from cookies_from_header_values(
        get_all_header_values(headers, COOKIE_HEADER),
        codec=codec,
        config=config,
    )


def _handle_parse_error(error: CookieParseError, config: CookieConfig) -> None:
    """Re-raise under fail-fast, otherwise log and count the skipped input."""
    record_parse_error(fatal=config.fail_fast)
    if config.fail_fast:
        raise error
    logger.warning("cookie.parse_skipped", error=error.message)
