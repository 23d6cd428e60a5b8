"""Structured logging configuration for the cookie middleware.

Logs are emitted through structlog. Events are named in ``component.action``
form, for example ``cookie.parse_failed`` or ``cookie.encode_skipped``; the
configured pipeline splits that name into ``component`` and ``action`` keys
so log queries can filter on either half.

Examples:
    Configure logging::

        from cookie_middleware.observability.logging import configure_logging

        configure_logging(level="INFO", json_output=True)

    Use the logger::

        from cookie_middleware.observability.logging import get_logger

        logger = get_logger(__name__)
        logger.warning("cookie.encode_skipped", cookie="session", error="...")

    Output (JSON)::

        {
            "event": "cookie.encode_skipped",
            "component": "cookie",
            "action": "encode_skipped",
            "cookie": "session",
            "error": "...",
            "level": "warning",
            "timestamp": "2024-01-01T00:00:00.000000Z"
        }
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog


def add_event_component(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Split a ``component.action`` event name into separate keys.

    Events without a dot, and keys already set by the caller, are left alone.
    """
    event = event_dict.get("event")
    if isinstance(event, str) and "." in event:
        component, _, action = event.partition(".")
        event_dict.setdefault("component", component)
        event_dict.setdefault("action", action)
    return event_dict


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """Configure structlog for the cookie middleware.

    Call once at application startup.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Emit JSON lines if True, colored console output if False

    Raises:
        ValueError: If ``level`` is not a known log level name.
    """
    numeric_level = _resolve_level(level)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_event_component,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
