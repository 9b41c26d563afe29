"""Shared HTTP client pool for provider adapters.

Adapters build a fresh SDK client per call but hand it a pooled
``httpx.Client`` so connections are reused across calls. Clients are keyed by
``(base_url, purpose)`` and configured with :func:`get_timeout_config` on
first creation. All pooled clients are closed at interpreter exit.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return the pooled ``httpx.Client`` for ``(base_url, purpose)``.

    Parameters:
        base_url: Optional base URL set on the client; ``None`` shares a key.
        purpose: Short pool discriminator, usually the provider name.

    Safe for concurrent use; creation is guarded by a re-entrant lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client
    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().to_httpx()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and forget every pooled client (test teardown, shutdown)."""
    with _LOCK:
        for c in _CLIENTS.values():
            with contextlib.suppress(Exception):  # nosec B110 - best-effort shutdown
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
