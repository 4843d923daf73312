"""Logging setup shared by the application and the ASGI server."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# uvicorn understands "trace"; the standard library tops out at DEBUG.
_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def resolve_log_level(level: str) -> int:
    """Translate a configured level name into a ``logging`` level."""

    try:
        return _LEVELS[level.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown log level: {level!r}") from exc


def configure_logging(level: str) -> None:
    """Attach a stream handler to the root logger at the requested level.

    Leaves the root logger untouched when a handler is already installed.
    """

    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "configure_logging", "resolve_log_level"]
