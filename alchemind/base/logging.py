"""Structured logging utilities for the alchemind core and adapters.

One shared ``alchemind`` logger is configured once (JSON lines on stderr by
default); module loggers propagate to it. Every event goes through
:func:`log_event` so payloads are single-line JSON objects with an ``event``
key. :func:`normalized_log_event` adds the canonical keys used by the
completion paths: ``phase``, ``error_code`` and ``emitted``.

Level is taken from ``ALCHEMIND_LOG_LEVEL`` when set.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

ROOT_LOGGER_NAME = "alchemind"
LOG_LEVEL_ENV = "ALCHEMIND_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_alchemind_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_alchemind_console_handler"
_FILE_HANDLER_ATTR = "_alchemind_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Unknown or empty values fall back to ``default``.
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


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``alchemind`` logger.

    On repeat calls the level is refreshed from the environment and a console
    handler whose stream was closed (pytest capture teardown) is replaced.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_console_handler(json_mode, desired_level))
            else:
                existing.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the shared logger, configuring it if needed."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == ROOT_LOGGER_NAME:
        return base_logger
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
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level (number or name). ``None`` keeps the current level.
    file_path: Optional[str]
        Attach a rotating file handler writing to this path. ``None`` removes a
        previously attached managed file handler; user handlers are untouched.
    json_mode: bool
        JSON formatter for the file handler when True, plain text otherwise.
    """
    logger = get_logger(ROOT_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    keep: Optional[logging.Handler] = None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            keep = h
            continue
        logger.removeHandler(h)
        with contextlib.suppress(Exception):
            h.close()
    if abs_path is None:
        return logger

    if keep is None:
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        # 10MB x 5 backups
        keep = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(keep, _FILE_HANDLER_ATTR, True)
        logger.addHandler(keep)
    keep.setFormatter(_formatter(json_mode))
    keep.setLevel(logger.level)
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
    """Emit one structured event as a JSON string message.

    ``None`` values are dropped unless ``keep_none`` is set. Context fields
    are merged first so explicit ``fields`` win on conflict.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("structured", "phase", "emitted")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    emitted: bool | None = None,
    level: int | None = None,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the canonical ``phase``/``error_code``/``emitted`` keys.

    ``error_code`` is omitted when ``None``; the other required keys are always
    present. Events with an error code default to WARNING level.
    """
    base_fields: Dict[str, Any] = {"structured": True, "phase": phase, "emitted": emitted}
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    if level is None:
        level = logging.WARNING if error_code is not None else logging.INFO
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "ROOT_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
