"""Cookie value codec protocol and the default percent-encoding codec.

The cookie store never touches cookie syntax directly. It relies on a codec
that turns one ``name=value`` segment of a ``Cookie`` header into a
:class:`~cookie_middleware.models.CookieRecord` and turns a record back into
a ``Set-Cookie`` header value. Any object with ``parse`` and ``encode``
methods satisfies :class:`CookieCodec`; :class:`PercentEncodedCodec` is the
implementation used when none is given.

Examples:
    Parsing and encoding with the default codec::

        from cookie_middleware.codec import PercentEncodedCodec
        from cookie_middleware.models import CookieRecord

        codec = PercentEncodedCodec()
        codec.parse("greeting=hello%20world").value  # "hello world"
        codec.encode(CookieRecord(name="a", value="b c", path="/"))
        # "a=b%20c; Path=/"

    Plugging in a custom codec::

        class UpperCaseCodec:
            def parse(self, pair: str) -> CookieRecord:
                ...

            def encode(self, record: CookieRecord) -> str:
                ...

        store = CookieStore.from_headers(headers, codec=UpperCaseCodec())
"""

import re
from datetime import UTC, datetime
from email.utils import format_datetime
from typing import Protocol, runtime_checkable
from urllib.parse import quote, unquote

from cookie_middleware.exceptions import CookieEncodeError, CookieParseError
from cookie_middleware.models import CookieRecord, SameSite

# RFC 6265 cookie-octets, minus "%" which introduces an escape
VALUE_SAFE_CHARS = "!#$&'()*+-./:<=>?@[]^_`{|}~"
# RFC 7230 token characters, minus "%"
NAME_SAFE_CHARS = "!#$&'*+-.^_`|~"

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_UNSAFE_ATTRIBUTE = re.compile(r"[^\x20-\x7e]|;")


@runtime_checkable
class CookieCodec(Protocol):
    """Protocol for cookie syntax codecs.

    Implementations must be stateless with respect to a single request: the
    store may call ``parse`` and ``encode`` any number of times in any order.
    """

    def parse(self, pair: str) -> CookieRecord:
        """Parse a single ``name=value`` segment of a ``Cookie`` header.

        Args:
            pair: One segment, without the ``;`` separator.

        Returns:
            The decoded cookie record.

        Raises:
            CookieParseError: If the segment is malformed.
        """
        ...

    def encode(self, record: CookieRecord) -> str:
        """Serialize a record to a ``Set-Cookie`` header value.

        Args:
            record: The record to serialize.

        Returns:
            A header-safe ``Set-Cookie`` value.

        Raises:
            CookieEncodeError: If the record cannot be serialized safely.
        """
        ...


def percent_decode(text: str) -> str:
    """Strictly percent-decode ``text`` as UTF-8.

    Raises:
        CookieParseError: On a dangling ``%`` or an invalid UTF-8 sequence.
    """
    if _INVALID_ESCAPE.search(text):
        raise CookieParseError(f"invalid percent-encoding in {text!r}")
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise CookieParseError(f"invalid UTF-8 in {text!r}: {e.reason}") from e


def format_expires(value: datetime) -> str:
    """Format an ``Expires`` attribute as an IMF-fixdate in GMT.

    Naive datetimes are assumed to already be in UTC.

    Examples:
        >>> format_expires(datetime(2015, 10, 21, 7, 28, tzinfo=UTC))
        'Wed, 21 Oct 2015 07:28:00 GMT'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return format_datetime(value.astimezone(UTC), usegmt=True)


class PercentEncodedCodec:
    """Default codec: percent-encoded names and values.

    Parsing trims whitespace around the name and value, strips one pair of
    surrounding double quotes from the value and percent-decodes both.
    Encoding escapes everything outside the RFC 6265 cookie-octet set and
    writes attributes in a fixed order.
    """

    def parse(self, pair: str) -> CookieRecord:
        """Parse one ``name=value`` segment.

        Args:
            pair: The raw segment.

        Returns:
            The decoded record.

        Raises:
            CookieParseError: If ``=`` is missing, the name is empty, or the
                percent-encoding is invalid.

        Examples:
            >>> PercentEncodedCodec().parse(' lang = "en%2DUS" ').value
            'en-US'
        """
        name, sep, value = pair.partition("=")
        if not sep:
            raise CookieParseError("missing name/value pair")

        name = name.strip()
        if not name:
            raise CookieParseError("empty cookie name")

        value = value.strip()
        if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]

        return CookieRecord(name=percent_decode(name), value=percent_decode(value))

    def encode(self, record: CookieRecord) -> str:
        """Serialize a record to a ``Set-Cookie`` value.

        Attribute order: HttpOnly, SameSite, Partitioned, Secure, Path,
        Domain, Max-Age, Expires. ``SameSite=None`` without an explicit
        ``secure`` setting implies ``Secure``.

        Args:
            record: The record to serialize.

        Returns:
            The encoded header value.

        Raises:
            CookieEncodeError: If ``path`` or ``domain`` contain ``;``,
                control characters or non-ASCII text.

        Examples:
            >>> PercentEncodedCodec().encode(
            ...     CookieRecord(name="id", value="a;b", http_only=True, path="/")
            ... )
            'id=a%3Bb; HttpOnly; Path=/'
        """
        name = quote(record.name, safe=NAME_SAFE_CHARS)
        value = quote(record.value, safe=VALUE_SAFE_CHARS)
        parts = [f"{name}={value}"]

        if record.http_only:
            parts.append("HttpOnly")
        if record.same_site is not None:
            parts.append(f"SameSite={record.same_site.value}")
        if record.partitioned:
            parts.append("Partitioned")
        if record.secure or (record.secure is None and record.same_site is SameSite.NONE):
            parts.append("Secure")
        if record.path is not None:
            parts.append(f"Path={self._check_attribute(record, 'Path', record.path)}")
        if record.domain is not None:
            parts.append(f"Domain={self._check_attribute(record, 'Domain', record.domain)}")
        if record.max_age is not None:
            parts.append(f"Max-Age={record.max_age}")
        if record.expires is not None:
            parts.append(f"Expires={format_expires(record.expires)}")

        return "; ".join(parts)

    def _check_attribute(self, record: CookieRecord, attribute: str, value: str) -> str:
        """Ensure an attribute value can be written into header text."""
        if _UNSAFE_ATTRIBUTE.search(value):
            raise CookieEncodeError(
                f"Cookie {record.name!r} has an unencodable {attribute} attribute: {value!r}",
                name=record.name,
            )
        return value
