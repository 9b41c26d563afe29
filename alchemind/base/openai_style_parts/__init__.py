"""OpenAI-style provider building blocks.

One class per module; this package re-exports them for a stable import
surface.
"""

from .base import BaseOpenAIStyleProvider
from .audio import OpenAIAudioMixin
from .client_protocol import _ChatCompletionsClient
from .provider_init import _ProviderInit

__all__ = [
    "BaseOpenAIStyleProvider",
    "OpenAIAudioMixin",
    "_ChatCompletionsClient",
    "_ProviderInit",
]
