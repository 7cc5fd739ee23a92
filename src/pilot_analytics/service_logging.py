"""Service call logging for the pilot analytics pipeline."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from .constants import LOG_DIR_ENV_VAR

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.environ.get(
    LOG_DIR_ENV_VAR,
    os.path.join(os.path.dirname(__file__), "..", "..", "logs"),
)
_LOG_FILE = os.path.join(_LOG_DIR, "service_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("pilot_analytics.service")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _summarise(value: Any) -> str:
    """Short repr for logging; sequences are reported by length only."""
    if isinstance(value, (list, tuple)):
        return f"<{type(value).__name__} of {len(value)}>"
    return repr(value)


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer method calls to the service log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        # Skip 'self'; lap lists are summarised rather than dumped
        arg_parts = [_summarise(a) for a in args[1:]]
        arg_parts += [f"{k}={_summarise(v)}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info(
                "SERVICE OK: %s -> %.3fs", fn.__qualname__, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
