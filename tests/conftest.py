"""
Pytest configuration and shared fixtures for cookie_middleware tests.
"""

import pytest

from cookie_middleware.codec import PercentEncodedCodec
from cookie_middleware.core.store import CookieStore


@pytest.fixture
def codec() -> PercentEncodedCodec:
    """Provide the default cookie codec."""
    return PercentEncodedCodec()


@pytest.fixture
def sample_store() -> CookieStore:
    """Provide a store parsed from a two-cookie request header."""
    return CookieStore.from_headers({"Cookie": "session=abc123; theme=dark"})
