"""Configuration module for the cookie middleware.

This module provides the CookieConfig class controlling how ``Cookie``
request headers are parsed and how ``Set-Cookie`` response headers are
emitted.

Example:
    Basic usage with defaults:

        >>> config = CookieConfig()
        >>> config.fail_fast
        True

    Custom configuration:

        >>> config = CookieConfig(
        ...     fail_fast=False,
        ...     strict_encoding=True,
        ...     on_parse_error="ignore",
        ... )

    Loading from environment:

        >>> import os
        >>> os.environ['COOKIE_FAIL_FAST'] = 'false'
        >>> os.environ['COOKIE_MAX_HEADER_VALUES'] = '16'
        >>> config = CookieConfig.from_env()
"""

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


class CookieConfig(BaseModel):
    """Configuration for cookie parsing and emission.

    Attributes:
        fail_fast: If True, the first malformed header value or cookie pair
            aborts parsing of every cookie in the request. If False, malformed
            input is skipped and logged. Default is True.
        strict_encoding: If True, a record that cannot be encoded raises
            CookieEncodeError during emission. If False, the record is
            skipped and logged. Default is False.
        on_parse_error: What the ASGI adapter does when parsing fails.
            "reject" answers 400 Bad Request, "ignore" continues with an
            empty store. Default is "reject".
        max_header_values: Maximum number of ``Cookie`` header lines accepted
            per request. Must be between 1 and 1024. Default is 64.

    Note:
        This class is immutable (frozen=True). Create a new instance if you
        need different settings.
    """

    fail_fast: bool = Field(
        default=True,
        description="Abort all cookie parsing on the first malformed input",
    )
    strict_encoding: bool = Field(
        default=False,
        description="Raise instead of skipping records that cannot be encoded",
    )
    on_parse_error: Literal["reject", "ignore"] = Field(
        default="reject",
        description="Adapter policy for unparseable cookies: 'reject' or 'ignore'",
    )
    max_header_values: int = Field(
        default=64,
        description="Maximum number of Cookie header values per request (1-1024)",
    )

    model_config = {"frozen": True}

    @field_validator("fail_fast", "strict_encoding", mode="before")
    @classmethod
    def validate_flag(cls, v: Any) -> Any:
        """Accept the usual textual spellings of booleans.

        Args:
            v: A bool or a string such as "true", "0" or "off".

        Returns:
            The value, converted to bool when given as a string.

        Raises:
            ValueError: If a string is not a recognised boolean spelling.
        """
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
            raise ValueError(f"Invalid boolean value: {v!r}")
        return v

    @field_validator("max_header_values")
    @classmethod
    def validate_max_header_values(cls, v: int) -> int:
        """Validate the header value limit is within range.

        Raises:
            ValueError: If the limit is not between 1 and 1024.
        """
        if not (1 <= v <= 1024):
            raise ValueError(f"max_header_values must be between 1 and 1024, got {v}")
        return v

    @classmethod
    def from_env(cls, prefix: str = "COOKIE_") -> "CookieConfig":
        """Create configuration from environment variables.

        Variable names are the uppercase field names with the prefix, for
        example ``COOKIE_FAIL_FAST``.

        Args:
            prefix: Prefix for environment variable names. Default is "COOKIE_".

        Returns:
            CookieConfig instance populated from environment variables.

        Example:
            >>> import os
            >>> os.environ['COOKIE_ON_PARSE_ERROR'] = 'ignore'
            >>> CookieConfig.from_env().on_parse_error
            'ignore'
        """
        config_dict: dict[str, Any] = {}

        field_types = {
            "fail_fast": bool,
            "strict_encoding": bool,
            "on_parse_error": str,
            "max_header_values": int,
        }

        for field_name, field_type in field_types.items():
            env_value = os.environ.get(f"{prefix}{field_name.upper()}")

            if env_value is not None:
                if field_type is int:
                    config_dict[field_name] = int(env_value)
                else:
                    # Booleans are converted by validate_flag
                    config_dict[field_name] = env_value

        return cls(**config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "CookieConfig":
        """Create configuration from a dictionary.

        Raises:
            ValidationError: If the dictionary contains invalid values.
        """
        return cls(**config_dict)
