"""Custom exceptions for the cookie middleware.

This module defines the exception hierarchy used to signal failures while
reading ``Cookie`` request headers and while writing ``Set-Cookie`` response
headers.

Examples:
    Handling a parse error at extraction time::

        from cookie_middleware.exceptions import CookieParseError

        try:
            store = CookieStore.from_headers(request.headers)
        except CookieParseError as e:
            logger.warning("cookie.parse_failed", error=e.message)
            return Response(status_code=400)

    Handling an encode error in strict mode::

        from cookie_middleware.exceptions import CookieEncodeError

        try:
            values = encode_delta(store, config=CookieConfig(strict_encoding=True))
        except CookieEncodeError as e:
            logger.error("cookie.encode_failed", cookie=e.name, error=e.message)
"""


class CookieError(Exception):
    """Base exception for all cookie-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class CookieParseError(CookieError):
    """A ``Cookie`` request header could not be parsed.

    Raised for both header decode failures (the raw value is not header-safe
    text) and malformed ``name=value`` pairs. The whole extraction fails; no
    partially populated store is ever returned.

    Attributes:
        message: Formatted description, prefixed with the header name.
        cause: The underlying reason, without the prefix.

    Examples:
        >>> error = CookieParseError("missing name/value pair")
        >>> error.message
        'failed to parse request header `cookie` (missing name/value pair)'
        >>> error.cause
        'missing name/value pair'
    """

    def __init__(self, cause: str) -> None:
        """Initialize the parse error.

        Args:
            cause: Why parsing failed.
        """
        super().__init__(f"failed to parse request header `cookie` ({cause})")
        self.cause = cause


class CookieEncodeError(CookieError):
    """A cookie record cannot be serialized into a ``Set-Cookie`` value.

    Attributes:
        message: Human-readable error description.
        name: Name of the cookie that failed to encode.
    """

    def __init__(self, message: str, name: str) -> None:
        """Initialize the encode error.

        Args:
            message: Human-readable error description.
            name: Name of the offending cookie.
        """
        super().__init__(message)
        self.name = name
