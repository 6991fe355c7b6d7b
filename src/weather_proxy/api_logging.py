"""Call logging for the upstream client and the request handler."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = "logs"
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure_log_dir(log_dir: str) -> None:
    """Point the file logger at ``log_dir``, reopening it if already in use."""
    global _LOG_DIR, _LOG_FILE, _logger
    with _logger_lock:
        if log_dir == _LOG_DIR:
            return
        _LOG_DIR = log_dir
        _LOG_FILE = os.path.join(log_dir, "api_calls.log")
        named_logger = logging.getLogger("weather_proxy.api")
        for handler in named_logger.handlers[:]:
            handler.close()
            named_logger.removeHandler(handler)
        _logger = None


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger("weather_proxy.api")
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any], skip: set[str]) -> str:
    # args[0] is self
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items() if k not in skip]
    return ", ".join(arg_parts)


def log_api_call(fn: F) -> F:
    """Decorator that logs upstream client calls to the API log file.

    The ``api_key`` keyword is never written to the log.
    """
    skip = {"api_key"}

    def _ok(logger: logging.Logger, arg_str: str, start: float) -> None:
        logger.info(
            "OK: %s(%s) (%.3fs)", fn.__qualname__, arg_str, time.monotonic() - start,
        )

    def _fail(logger: logging.Logger, arg_str: str, start: float, exc: Exception) -> None:
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = _get_logger()
            arg_str = _arg_summary(args, kwargs, skip)
            logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(logger, arg_str, start, exc)
                raise
            _ok(logger, arg_str, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _arg_summary(args, kwargs, skip)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(logger, arg_str, start, exc)
            raise
        _ok(logger, arg_str, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_request_call(fn: F) -> F:
    """Decorator that logs handled requests and their response status."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        logger.info("REQUEST: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            response = await fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "REQUEST FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info(
            "REQUEST OK: %s -> %d (%.3fs)",
            fn.__qualname__, response.status_code, elapsed,
        )
        return response

    return wrapper  # type: ignore[return-value]
