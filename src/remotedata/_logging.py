"""Package logger for the remotedata bridges."""

from __future__ import annotations

import logging
import threading

LOGGER_NAME = "remotedata"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configure_lock = threading.Lock()
_configured_handler: logging.Handler | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or its child ``remotedata.<name>``."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(
    level: int = logging.INFO,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Send remotedata log records to ``handler`` (stderr by default).

    Only one handler is ever installed; later calls just update the level.
    """
    global _configured_handler
    logger = get_logger()

    with _configure_lock:
        logger.setLevel(level)
        if _configured_handler is None:
            _configured_handler = handler or logging.StreamHandler()
            _configured_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(_configured_handler)

    return logger


def summarize_args(args: tuple[object, ...], kwargs: dict[str, object]) -> str:
    """Build a readable argument summary for CALL/OK/FAIL lines."""
    arg_parts = [repr(a) for a in args]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)
