"""Unit tests for the cookie codec."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from cookie_middleware.codec import (
    CookieCodec,
    PercentEncodedCodec,
    format_expires,
    percent_decode,
)
from cookie_middleware.exceptions import CookieEncodeError, CookieParseError
from cookie_middleware.models import CookieRecord, SameSite


class TestPercentDecode:
    """Tests for percent_decode."""

    def test_plain_text(self):
        """Text without escapes should be returned unchanged."""
        assert percent_decode("hello") == "hello"

    def test_decodes_escapes(self):
        """Escapes should be decoded as UTF-8."""
        assert percent_decode("a%20b") == "a b"
        assert percent_decode("caf%C3%A9") == "café"

    def test_lowercase_hex(self):
        """Lowercase hex digits should be accepted."""
        assert percent_decode("%3b") == ";"

    @pytest.mark.parametrize("text", ["%", "abc%", "%2", "%zz", "a%g1b"])
    def test_dangling_escape(self, text):
        """A % not followed by two hex digits should fail."""
        with pytest.raises(CookieParseError) as exc_info:
            percent_decode(text)
        assert "invalid percent-encoding" in exc_info.value.cause

    def test_invalid_utf8(self):
        """An escape sequence that is not UTF-8 should fail."""
        with pytest.raises(CookieParseError) as exc_info:
            percent_decode("%FF%FE")
        assert "invalid UTF-8" in exc_info.value.cause


class TestFormatExpires:
    """Tests for format_expires."""

    def test_aware_utc(self):
        """UTC datetimes should be formatted as IMF-fixdate."""
        value = datetime(2015, 10, 21, 7, 28, tzinfo=UTC)
        assert format_expires(value) == "Wed, 21 Oct 2015 07:28:00 GMT"

    def test_naive_assumed_utc(self):
        """Naive datetimes should be treated as UTC."""
        assert format_expires(datetime(2015, 10, 21, 7, 28)) == "Wed, 21 Oct 2015 07:28:00 GMT"

    def test_other_timezone_converted(self):
        """Non-UTC datetimes should be converted to GMT."""
        value = datetime(2015, 10, 21, 9, 28, tzinfo=timezone(timedelta(hours=2)))
        assert format_expires(value) == "Wed, 21 Oct 2015 07:28:00 GMT"


class TestParse:
    """Tests for PercentEncodedCodec.parse."""

    def test_simple_pair(self, codec):
        """A simple pair should parse to name and value."""
        record = codec.parse("a=1")
        assert record == CookieRecord(name="a", value="1")

    def test_trims_whitespace(self, codec):
        """Whitespace around name and value should be removed."""
        record = codec.parse("  name  =  value  ")
        assert record.name == "name"
        assert record.value == "value"

    def test_empty_value(self, codec):
        """An empty value is valid."""
        assert codec.parse("a=").value == ""

    def test_value_containing_equals(self, codec):
        """Only the first = separates name and value."""
        assert codec.parse("token=abc==").value == "abc=="

    def test_strips_surrounding_quotes(self, codec):
        """One pair of surrounding double quotes should be stripped."""
        assert codec.parse('a="quoted"').value == "quoted"

    def test_keeps_unbalanced_quote(self, codec):
        """A single quote character should be kept."""
        assert codec.parse('a="open').value == '"open'

    def test_percent_decodes_name_and_value(self, codec):
        """Name and value should be percent-decoded."""
        record = codec.parse("my%20name=hello%2C%20world")
        assert record.name == "my name"
        assert record.value == "hello, world"

    def test_missing_equals(self, codec):
        """A segment without = should fail."""
        with pytest.raises(CookieParseError) as exc_info:
            codec.parse("novalue")
        assert exc_info.value.cause == "missing name/value pair"

    @pytest.mark.parametrize("pair", ["=value", "  =value", "="])
    def test_empty_name(self, codec, pair):
        """An empty name should fail."""
        with pytest.raises(CookieParseError) as exc_info:
            codec.parse(pair)
        assert exc_info.value.cause == "empty cookie name"

    def test_invalid_escape_in_value(self, codec):
        """Invalid percent-encoding in the value should fail."""
        with pytest.raises(CookieParseError):
            codec.parse("a=100%")


class TestEncode:
    """Tests for PercentEncodedCodec.encode."""

    def test_name_value_only(self, codec):
        """A bare record should encode to name=value."""
        assert codec.encode(CookieRecord(name="a", value="1")) == "a=1"

    def test_escapes_unsafe_value_characters(self, codec):
        """Space, quote, comma, semicolon, backslash and % should be escaped."""
        record = CookieRecord(name="a", value='x y"z,;\\%')
        assert codec.encode(record) == "a=x%20y%22z%2C%3B%5C%25"

    def test_keeps_cookie_octets(self, codec):
        """RFC 6265 cookie-octets should stay literal."""
        value = "!#$&'()*+-./:<=>?@[]^_`{|}~"
        assert codec.encode(CookieRecord(name="a", value=value)) == f"a={value}"

    def test_escapes_equals_in_name(self, codec):
        """= in a name should be escaped so it re-parses correctly."""
        assert codec.encode(CookieRecord(name="a=b", value="1")) == "a%3Db=1"

    def test_escapes_separators_in_name(self, codec):
        """Separators allowed in values should be escaped in names."""
        record = CookieRecord(name="a(b)<c>@d[e]?f/g:h{i}", value="(x)")
        assert codec.encode(record) == (
            "a%28b%29%3Cc%3E%40d%5Be%5D%3Ff%2Fg%3Ah%7Bi%7D=(x)"
        )

    def test_keeps_token_characters_in_name(self, codec):
        """RFC 7230 token characters should stay literal in names."""
        name = "Ab9!#$&'*+-.^_`|~"
        assert codec.encode(CookieRecord(name=name, value="1")) == f"{name}=1"

    def test_non_ascii_value(self, codec):
        """Non-ASCII text should be UTF-8 percent-encoded."""
        assert codec.encode(CookieRecord(name="a", value="café")) == "a=caf%C3%A9"

    def test_attribute_order(self, codec):
        """Attributes should be written in a fixed order."""
        record = CookieRecord(
            name="session",
            value="abc",
            http_only=True,
            same_site=SameSite.STRICT,
            partitioned=True,
            secure=True,
            path="/",
            domain="example.com",
            max_age=3600,
            expires=datetime(2015, 10, 21, 7, 28, tzinfo=UTC),
        )

        assert codec.encode(record) == (
            "session=abc; HttpOnly; SameSite=Strict; Partitioned; Secure; Path=/; "
            "Domain=example.com; Max-Age=3600; Expires=Wed, 21 Oct 2015 07:28:00 GMT"
        )

    def test_false_flags_are_omitted(self, codec):
        """Flags explicitly set to False should not be written."""
        record = CookieRecord(name="a", value="1", http_only=False, secure=False)
        assert codec.encode(record) == "a=1"

    def test_same_site_none_implies_secure(self, codec):
        """SameSite=None without an explicit secure flag should add Secure."""
        record = CookieRecord(name="a", value="1", same_site=SameSite.NONE)
        assert codec.encode(record) == "a=1; SameSite=None; Secure"

    def test_same_site_none_with_secure_false(self, codec):
        """An explicit secure=False should be respected."""
        record = CookieRecord(name="a", value="1", same_site=SameSite.NONE, secure=False)
        assert codec.encode(record) == "a=1; SameSite=None"

    def test_max_age_zero(self, codec):
        """Max-Age=0 should be written."""
        assert codec.encode(CookieRecord(name="a", max_age=0)) == "a=; Max-Age=0"

    @pytest.mark.parametrize("path", ["/a;b", "/a\nb", "/café", "/a\x00"])
    def test_unencodable_path(self, codec, path):
        """Paths with ;, control or non-ASCII characters should fail."""
        with pytest.raises(CookieEncodeError) as exc_info:
            codec.encode(CookieRecord(name="a", value="1", path=path))
        assert exc_info.value.name == "a"
        assert "Path" in exc_info.value.message

    def test_unencodable_domain(self, codec):
        """Domains with ; should fail."""
        with pytest.raises(CookieEncodeError) as exc_info:
            codec.encode(CookieRecord(name="a", value="1", domain="evil.com; Secure"))
        assert "Domain" in exc_info.value.message

    def test_encoded_output_is_header_safe(self, codec):
        """Encoded output should only contain visible ASCII and spaces."""
        encoded = codec.encode(CookieRecord(name="ключ", value="значение\r\n"))
        assert all(" " <= char <= "~" for char in encoded)


class TestCodecProtocol:
    """Tests for the CookieCodec protocol."""

    def test_default_codec_satisfies_protocol(self, codec):
        """PercentEncodedCodec should be a CookieCodec."""
        assert isinstance(codec, CookieCodec)

    def test_custom_codec_satisfies_protocol(self):
        """Any object with parse and encode should satisfy the protocol."""

        class Custom:
            def parse(self, pair: str) -> CookieRecord:
                return CookieRecord(name=pair)

            def encode(self, record: CookieRecord) -> str:
                return record.name

        assert isinstance(Custom(), CookieCodec)

    def test_object_without_encode_does_not_satisfy(self):
        """Objects missing a method should not satisfy the protocol."""

        class ParseOnly:
            def parse(self, pair: str) -> CookieRecord:
                return CookieRecord(name=pair)

        assert not isinstance(ParseOnly(), CookieCodec)
