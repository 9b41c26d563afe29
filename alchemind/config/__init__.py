"""Unified configuration layer for providers.

Merge order for ``get_provider_config(provider, overrides)`` (later wins):

1. Built-in defaults (``alchemind.config.defaults``)
2. Optional external config file named by ``ALCHEMIND_CONFIG_FILE``
   (``.json`` parsed as JSON, anything else as YAML)
3. Environment variables ``<PROVIDER>_MODEL``, ``<PROVIDER>_API_KEY``,
   ``<PROVIDER>_BASE_URL``, ``<PROVIDER>_ORGANIZATION``
4. Explicit ``overrides`` (construction options given to ``new``);
   ``None`` values never override

A ``.env`` file (``DOTENV_FILE``, default ``.env``) is loaded once before the
environment is read. Existing variables are only replaced when they hold a
placeholder value.

External config file example::

    openai:
      model: gpt-4o-mini
      temperature: 0.2
    deepseek:
      base_url: https://api.deepseek.com/v1
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.errors import ErrorCode, InitError
from .defaults import (
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
    XAI_DEFAULT_BASE_URL,
    XAI_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key

CONFIG_FILE_ENV = "ALCHEMIND_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL},
    "deepseek": {"model": DEEPSEEK_DEFAULT_MODEL, "base_url": DEEPSEEK_DEFAULT_BASE_URL},
    "xai": {"model": XAI_DEFAULT_MODEL, "base_url": XAI_DEFAULT_BASE_URL},
    "mock": {},
}

ENV_FIELD_MAP = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "organization": "ORGANIZATION",
}

_FILE_CACHE: Dict[str, Dict[str, Any]] = {}
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse ``KEY=VALUE`` lines from the dotenv file into ``os.environ``.

    Comments and blank lines are ignored; surrounding quotes are stripped.
    Safe to call repeatedly.
    """
    global _DOTENV_LOADED  # noqa: PLW0603 - module cache
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


def _load_external_config() -> Dict[str, Any]:
    """Load (and cache per path) the external config file.

    Raises:
        InitError: when the file exists but cannot be parsed into a mapping.
    """
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    if path in _FILE_CACHE:
        return _FILE_CACHE[path]
    p = Path(path)
    if not p.exists():
        _FILE_CACHE[path] = {}
        return _FILE_CACHE[path]
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise InitError(f"could not parse config file {path}: {exc}", code=ErrorCode.VALIDATION) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InitError(f"config file {path} must contain a mapping of provider sections")
    _FILE_CACHE[path] = data
    return data


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val and not is_placeholder(val):
            out[field] = val
    if "api_key" not in out:
        key, _ = resolve_provider_key(provider)
        if key:
            out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration for ``provider``.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def reset_config_cache() -> None:
    """Forget the cached config file and allow the dotenv file to be re-read."""
    global _DOTENV_LOADED  # noqa: PLW0603 - module cache
    _FILE_CACHE.clear()
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
]
