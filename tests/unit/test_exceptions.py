"""Unit tests for custom exceptions.

Tests in this module verify that the exception hierarchy is correctly
defined and that exceptions carry the expected information.
"""

import pytest

from cookie_middleware.exceptions import CookieEncodeError, CookieError, CookieParseError


class TestCookieError:
    """Test suite for the base CookieError exception."""

    def test_creation(self):
        """CookieError should be created with a message."""
        error = CookieError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"

    def test_is_exception(self):
        """CookieError should inherit from Exception."""
        assert isinstance(CookieError("Test error"), Exception)


class TestCookieParseError:
    """Test suite for CookieParseError."""

    def test_message_is_prefixed(self):
        """The message should name the cookie header and keep the cause."""
        error = CookieParseError("missing name/value pair")

        assert error.message == (
            "failed to parse request header `cookie` (missing name/value pair)"
        )
        assert str(error) == error.message
        assert error.cause == "missing name/value pair"

    def test_inherits_from_base(self):
        """CookieParseError should be catchable as CookieError."""
        with pytest.raises(CookieError):
            raise CookieParseError("bad")


class TestCookieEncodeError:
    """Test suite for CookieEncodeError."""

    def test_carries_name(self):
        """CookieEncodeError should expose the cookie name."""
        error = CookieEncodeError("bad path", name="session")

        assert error.message == "bad path"
        assert error.name == "session"

    def test_inherits_from_base(self):
        """CookieEncodeError should be catchable as CookieError."""
        with pytest.raises(CookieError):
            raise CookieEncodeError("bad", name="a")

    def test_distinct_from_parse_error(self):
        """Encode errors should not be mistaken for parse errors."""
        assert not isinstance(CookieEncodeError("bad", name="a"), CookieParseError)
