"""Logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging
import sys

from guideplan.config import GUIDEPLAN_LOG_LEVEL

_HANDLED_LOGGERS = ("guideplan", "server")
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} | {pairs}"


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the package loggers.

    Calling it again only updates the level.
    """
    global _configured
    resolved = (level or GUIDEPLAN_LOG_LEVEL).upper()
    for name in _HANDLED_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if not any(getattr(h, "_guideplan_handler", False) for h in logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
            handler._guideplan_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for ``name``."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
