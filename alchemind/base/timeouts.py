"""Timeout configuration for backend transports.

The core owns no timeouts of its own: values here are handed to the HTTP
pool (and through it to the backend SDKs), which surface expiry as exceptions
that adapters classify as ``ErrorCode.TIMEOUT``.

Environment overrides (seconds, positive floats; invalid values ignored):
    ALCHEMIND_TIMEOUT_HTTP_SECONDS     overall read/write budget per request
    ALCHEMIND_TIMEOUT_CONNECT_SECONDS  connection establishment
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

HTTP_TIMEOUT_ENV = "ALCHEMIND_TIMEOUT_HTTP_SECONDS"
CONNECT_TIMEOUT_ENV = "ALCHEMIND_TIMEOUT_CONNECT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values in seconds."""

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: Optional[TimeoutConfig] = None
_ENV_GUARD: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached ``TimeoutConfig``.

    The cache is refreshed when the environment overrides change so tests can
    adjust values with ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = f"{os.getenv(HTTP_TIMEOUT_ENV, '')}/{os.getenv(CONNECT_TIMEOUT_ENV, '')}"
    if _CACHED is not None and guard == _ENV_GUARD:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, defaults.http_timeout_seconds),
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, defaults.connect_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config", "HTTP_TIMEOUT_ENV", "CONNECT_TIMEOUT_ENV"]
