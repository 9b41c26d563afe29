"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``alchemind.base.interfaces`` to re-export a stable API.
"""

from .llm_provider import LLMProvider
from .supports_streaming import SupportsStreaming
from .supports_transcription import SupportsTranscription
from .supports_speech import SupportsSpeech
from .has_default_model import HasDefaultModel

__all__ = [
    "LLMProvider",
    "SupportsStreaming",
    "SupportsTranscription",
    "SupportsSpeech",
    "HasDefaultModel",
]
