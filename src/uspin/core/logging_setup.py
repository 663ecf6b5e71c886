from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "USPIN_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

_USPIN_STREAM_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def resolve_level(verbose: bool = False) -> int:
    """Pick the log level: ``--verbose`` wins, then ``USPIN_LOG_LEVEL``."""
    if verbose:
        return logging.DEBUG
    return _level_from_name(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL))


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send ``uspin`` log records to stderr (stdout stays clean for --json).

    Idempotent per-process: the handler is installed once and only its level
    is updated on later calls.
    """
    global _USPIN_STREAM_HANDLER

    log = logging.getLogger("uspin")
    log.setLevel(level)

    if _USPIN_STREAM_HANDLER is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        log.addHandler(handler)
        _USPIN_STREAM_HANDLER = handler

    _USPIN_STREAM_HANDLER.setLevel(level)
    return log


__all__ = ["configure_logging", "resolve_level", "LOG_LEVEL_ENV"]
