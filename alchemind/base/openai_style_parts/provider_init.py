"""Initialization dataclass for OpenAI-style providers.

Pure data container; no I/O happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..dto import AdapterParams


@dataclass(frozen=True)
class _ProviderInit:
    """Initialization bundle for ``BaseOpenAIStyleProvider``.

    Attributes:
        params: Validated construction options (api key, base URL, defaults).
        base_url: Effective base URL; ``None`` lets the SDK use its default.
        default_model: Model used when a call does not name one.
        logger_name: Structured logger name (e.g. ``alchemind.deepseek``).
    """

    params: AdapterParams
    base_url: Optional[str]
    default_model: Optional[str]
    logger_name: str


__all__ = ["_ProviderInit"]
