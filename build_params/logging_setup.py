"""Logging helpers for parameter lookups.

Lookup records carry the parameter value, so values of keys that look like
secrets are masked before they reach any handler.
"""

from __future__ import annotations

import logging
import re

from build_params.config import ResolverSettings

PACKAGE_LOGGER = "build_params"

_REPLACEMENT = "[REDACTED]"

# Common secret-ish key names.
_SECRET_KEY_RE = re.compile(
    r"(^|_)(password|passwd|pwd|secret|token|api_?key|access_?key|private_?key|authorization)($|_)",
    flags=re.IGNORECASE,
)


def looks_sensitive_key(key: str) -> bool:
    """Return True when a logical key names a secret-like parameter."""
    return bool(_SECRET_KEY_RE.search(key.replace("-", "_")))


def display_value(key: str, value: str, *, redact: bool = True) -> str:
    if redact and looks_sensitive_key(key):
        return _REPLACEMENT
    return value


def configure_logging(settings: ResolverSettings | None = None) -> logging.Logger:
    """Apply ``settings`` to the package logger.

    Safe to call multiple times; only the level is touched and a
    ``NullHandler`` is attached at most once.
    """

    settings = settings or ResolverSettings.from_env()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))

    # Avoid duplicating the handler if called repeatedly.
    for existing in logger.handlers:
        if isinstance(existing, logging.NullHandler):
            return logger

    logger.addHandler(logging.NullHandler())
    return logger
