"""XAIProvider adapter.

Reuses ``BaseOpenAIStyleProvider`` for chat and streaming against xAI's
OpenAI-compatible endpoint. No audio capabilities.
"""

from __future__ import annotations

from ..base.dto import AdapterParams
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..config.defaults import XAI_DEFAULT_BASE_URL, XAI_DEFAULT_MODEL


class XAIProvider(BaseOpenAIStyleProvider):
    provider_key = "xai"

    def __init__(self, params: AdapterParams) -> None:
        init = _ProviderInit(
            params=params,
            base_url=params.base_url or XAI_DEFAULT_BASE_URL,
            default_model=params.model or XAI_DEFAULT_MODEL,
            logger_name="alchemind.xai",
        )
        super().__init__(init)


__all__ = ["XAIProvider"]
