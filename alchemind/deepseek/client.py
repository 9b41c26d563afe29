"""DeepseekProvider adapter using the OpenAI-compatible Chat Completions API.

Chat and streaming are inherited from ``BaseOpenAIStyleProvider``. Deepseek
serves no audio endpoints, so transcription and speech are reported as
unsupported by capability negotiation.
"""

from __future__ import annotations

from ..base.dto import AdapterParams
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL, DEEPSEEK_DEFAULT_MODEL


class DeepseekProvider(BaseOpenAIStyleProvider):
    """Deepseek provider built on the OpenAI-style base class."""

    provider_key = "deepseek"

    def __init__(self, params: AdapterParams) -> None:
        init = _ProviderInit(
            params=params,
            base_url=params.base_url or DEEPSEEK_DEFAULT_BASE_URL,
            default_model=params.model or DEEPSEEK_DEFAULT_MODEL,
            logger_name="alchemind.deepseek",
        )
        super().__init__(init)


__all__ = ["DeepseekProvider"]
