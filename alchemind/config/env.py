"""alchemind.config.env
====================

Environment variable naming for provider credentials plus the placeholder
heuristic used by the ``.env`` loader.

Helpers never raise on unknown providers or unset variables; they return
``None`` and let the caller decide (usually ``new`` raising ``InitError``).
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "xai": "XAI_API_KEY",
}

# Provider -> ordered acceptable names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "xai": ("XAI_API_KEY", "GROK_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real value.

    Heuristics (case-insensitive): contains ``placeholder``, ``changeme`` or
    ``example``, or starts with ``test_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable env var names for ``provider``, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-empty candidate.

    Placeholder values are skipped. ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
]
