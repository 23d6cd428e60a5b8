"""Core type definitions for the cookie middleware.

This module provides the data structures shared by the parser, the cookie
store and the response emitter: cookie records with their attributes, the
SameSite policy, and the entries that make up a store's delta.

Examples:
    Creating a cookie record::

        from cookie_middleware.models import CookieRecord, SameSite

        record = CookieRecord(
            name="session",
            value="abc123",
            path="/",
            http_only=True,
            same_site=SameSite.LAX,
        )

    Turning it into a removal directive::

        removal = record.into_removal()
        # removal.value == "" and removal.max_age == 0
"""

from datetime import UTC, datetime, timedelta
from enum import Enum

from pydantic import BaseModel, Field

# How far in the past a removal cookie's Expires attribute is set
REMOVAL_EXPIRES_OFFSET = timedelta(days=365)


class SameSite(str, Enum):
    """The ``SameSite`` cookie attribute.

    Attributes:
        STRICT: Cookie is only sent for same-site requests.
        LAX: Cookie is also sent on top-level cross-site navigations.
        NONE: Cookie is sent for all requests (requires ``Secure``).
    """

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


class DeltaKind(str, Enum):
    """Classification of a cookie name relative to the original request.

    Attributes:
        UNMODIFIED: Present originally and not changed.
        ADDED: Not present originally, added during the request.
        OVERWRITTEN: Present originally, replaced with a different record.
        REMOVED: Present originally, removed during the request.
    """

    UNMODIFIED = "UNMODIFIED"
    ADDED = "ADDED"
    OVERWRITTEN = "OVERWRITTEN"
    REMOVED = "REMOVED"


class CookieRecord(BaseModel):
    """A named cookie and its attributes.

    Records are produced by parsing one segment of a ``Cookie`` header (in
    which case only ``name`` and ``value`` are set) or built by application
    code before being added to a store. Records are immutable; use
    :meth:`with_value` or ``model_copy`` to derive new ones.

    Attributes:
        name: Cookie name (decoded).
        value: Cookie value (decoded).
        domain: ``Domain`` attribute.
        path: ``Path`` attribute.
        expires: ``Expires`` attribute, an aware or naive UTC datetime.
        max_age: ``Max-Age`` attribute in seconds.
        same_site: ``SameSite`` attribute.
        secure: ``Secure`` flag; ``None`` means unset.
        http_only: ``HttpOnly`` flag; ``None`` means unset.
        partitioned: ``Partitioned`` flag; ``None`` means unset.

    Examples:
        >>> record = CookieRecord(name="theme", value="dark")
        >>> record.with_value("light").value
        'light'
    """

    name: str = Field(
        ...,
        description="Cookie name",
        min_length=1,
        examples=["session", "theme"],
    )
    value: str = Field(
        default="",
        description="Cookie value",
        examples=["abc123", "dark"],
    )
    domain: str | None = Field(
        default=None,
        description="Domain attribute",
        examples=["example.com"],
    )
    path: str | None = Field(
        default=None,
        description="Path attribute",
        examples=["/", "/api"],
    )
    expires: datetime | None = Field(
        default=None,
        description="Expires attribute",
    )
    max_age: int | None = Field(
        default=None,
        description="Max-Age attribute in seconds",
        ge=0,
        examples=[0, 3600],
    )
    same_site: SameSite | None = Field(
        default=None,
        description="SameSite attribute",
    )
    secure: bool | None = Field(default=None, description="Secure flag")
    http_only: bool | None = Field(default=None, description="HttpOnly flag")
    partitioned: bool | None = Field(default=None, description="Partitioned flag")

    model_config = {"frozen": True}

    def with_value(self, value: str) -> "CookieRecord":
        """Return a copy of this record carrying a different value.

        Args:
            value: The new cookie value.

        Returns:
            A new record with every other attribute preserved.
        """
        return self.model_copy(update={"value": value})

    def into_removal(self) -> "CookieRecord":
        """Return the record that instructs a client to delete this cookie.

        The removal keeps ``path`` and ``domain`` so that it targets the same
        cookie, clears the value and sets ``Max-Age=0`` together with an
        ``Expires`` date one year in the past.

        Returns:
            A removal record for this cookie's name.
        """
        return CookieRecord(
            name=self.name,
            value="",
            domain=self.domain,
            path=self.path,
            max_age=0,
            expires=datetime.now(UTC) - REMOVAL_EXPIRES_OFFSET,
        )


class DeltaEntry(BaseModel):
    """One change that must be sent back to the client.

    Attributes:
        kind: ADDED, OVERWRITTEN or REMOVED.
        record: The record to encode. For REMOVED this is the removal record.
    """

    kind: DeltaKind = Field(..., description="Kind of change")
    record: CookieRecord = Field(..., description="Record to encode")

    model_config = {"frozen": True}
