"""Pytest configuration for the alchemind test suite.

Every test runs with provider credentials, the config file and the dotenv
file isolated from the developer's environment, and the pooled HTTP clients
are closed once the session ends.
"""

from __future__ import annotations

import json
import logging
from contextlib import suppress
from typing import Any, Dict, Iterator, List

import pytest

from alchemind.base.logging import get_logger
from alchemind.config import reset_config_cache

_ISOLATED_ENV = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_ORGANIZATION",
    "DEEPSEEK_API_KEY",
    "DEEPSEEK_MODEL",
    "XAI_API_KEY",
    "GROK_API_KEY",
    "MOCK_MODEL",
    "ALCHEMIND_CONFIG_FILE",
    "ALCHEMIND_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear provider env vars and point the dotenv loader at an empty path."""
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def log_events() -> Iterator[List[Dict[str, Any]]]:
    """Capture structured events emitted on the ``alchemind`` logger as dicts."""
    events: List[Dict[str, Any]] = []
    handler = logging.Handler()

    def _emit(record: logging.LogRecord) -> None:
        with suppress(ValueError):
            payload = json.loads(record.getMessage())
            if isinstance(payload, dict):
                payload["_level"] = record.levelno
                events.append(payload)

    handler.emit = _emit  # type: ignore[assignment]
    logger = get_logger()
    logger.addHandler(handler)
    try:
        yield events
    finally:
        logger.removeHandler(handler)


@pytest.fixture(scope="session", autouse=True)
def close_http_clients_after_session() -> Iterator[None]:
    """Close pooled ``httpx`` clients once the session ends."""
    yield
    from alchemind.base.http import close_all_clients

    close_all_clients()
