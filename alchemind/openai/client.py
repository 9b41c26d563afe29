"""OpenAI provider adapter built on BaseOpenAIStyleProvider.

Chat completions (blocking and streamed) come from the shared OpenAI-style
base; transcription and speech come from ``OpenAIAudioMixin``. This is the
reference backend: it implements every optional capability.

Construction options: ``api_key`` (required), ``base_url``, ``model``,
``temperature``, ``organization``, ``transcription_model``,
``speech_model`` and ``voice``.
"""

from __future__ import annotations

from ..base.dto import AdapterParams
from ..base.openai_style_parts import BaseOpenAIStyleProvider, OpenAIAudioMixin, _ProviderInit

__all__ = ["OpenAIProvider"]


class OpenAIProvider(OpenAIAudioMixin, BaseOpenAIStyleProvider):
    """OpenAI adapter: chat, streaming, transcription and speech."""

    provider_key = "openai"

    def __init__(self, params: AdapterParams) -> None:
        init = _ProviderInit(
            params=params,
            # ``None`` lets the SDK pick api.openai.com (or OPENAI_BASE_URL).
            base_url=params.base_url,
            default_model=params.model,
            logger_name="alchemind.openai",
        )
        super().__init__(init)
