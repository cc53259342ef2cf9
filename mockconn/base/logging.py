"""Base structured logging utilities for the mockconn package.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the connection and reporters.

Every connection event goes through ``normalized_log_event`` which guarantees
the canonical keys ``phase``, ``index``, ``operation`` and ``error_code`` (the
latter omitted when ``None``) so events from many connections in one test run
can be filtered uniformly.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from ..config.defaults import DEFAULT_LOG_JSON, DEFAULT_LOG_LEVEL
from ..config.env import LOG_JSON_ENV, LOG_LEVEL_ENV, env_flag
from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "mockconn"

_BASE_LOGGER_ATTR = "_mockconn_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_mockconn_console_handler"
_FILE_HANDLER_ATTR = "_mockconn_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = DEFAULT_LOG_LEVEL) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger() -> logging.Logger:
    """Initialize and return the shared ``mockconn`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    json_mode = env_flag(LOG_JSON_ENV, DEFAULT_LOG_JSON)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        # the env var wins when set; otherwise keep what configure_logger chose
        level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=logger.level)
        if logger.level != level:
            logger.setLevel(level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # pytest capture closes the stderr it swapped in
                logger.removeHandler(existing)
                with contextlib.suppress(ValueError):
                    existing.close()
                logger.addHandler(_console_handler(level, json_mode))
                continue
            existing.setLevel(level)
            if hasattr(existing, "setStream"):
                existing.setStream(sys.stderr)
        return logger

    level = _parse_level(os.getenv(LOG_LEVEL_ENV))
    logger.setLevel(level)
    logger.handlers[:] = [_console_handler(level, json_mode)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _console_handler(level: int, json_mode: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return the shared logger or a propagating child of it."""
    base_logger = _ensure_base_logger()
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(f"{BASE_LOGGER_NAME}."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``mockconn`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (replacing a previously managed one pointing elsewhere). When
        ``None``, any managed file handler is removed.
    json_mode: bool
        Formatter choice for the managed file handler.

    Returns
    -------
    logging.Logger
        The configured logger instance. Handlers not created by this module
        are left untouched.
    """
    logger = _ensure_base_logger()

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if isinstance(h, logging.FileHandler) and h.baseFilename == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Keys whose values are ``None`` are dropped unless ``keep_none`` is set.
    Bytes values are rendered with ``repr`` so payloads stay JSON-safe.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    for k, v in fields.items():
        if v is None and not keep_none:
            continue
        payload[k] = repr(v) if isinstance(v, (bytes, bytearray)) else v
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


# ---------------------- Normalization Layer ---------------------------------
REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "index",
    "operation",
    "error_code",
)


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    index: int | None = None,
    operation: str | None = None,
    error_code: str | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a connection event carrying the canonical normalized keys.

    ``error_code`` is omitted when ``None``; the other required keys are always
    present (``null`` when unknown). Extra fields never clobber normalized
    values.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "index": index,
        "operation": operation,
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
