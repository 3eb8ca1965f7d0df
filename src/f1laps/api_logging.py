"""API and service call logging for the f1laps client and service layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "f1laps.api"

_LOG_DIR = os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure_log_dir(log_dir: str | os.PathLike[str]) -> None:
    """Point the API log at ``log_dir``; takes effect on the next logged call."""
    global _LOG_DIR, _LOG_FILE, _logger
    with _logger_lock:
        if _logger is not None:
            for handler in _logger.handlers[:]:
                handler.close()
                _logger.removeHandler(handler)
            _logger = None
        _LOG_DIR = os.fspath(log_dir)
        _LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")


def get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _result_size(result: Any) -> int:
    if isinstance(result, (list, dict)):
        return len(result)
    return 1


def log_api_call(fn: F) -> F:
    """Decorator that logs client endpoint calls to the API log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _result_size(result), elapsed,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer method calls to the API log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
