"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the Protocols split into single-class modules under
``alchemind.base.interfaces_parts``. The required capability is
``LLMProvider``; streaming, transcription and speech are optional and each
has its own narrower Protocol checked by capability negotiation.
"""

from __future__ import annotations

from .interfaces_parts import (
    HasDefaultModel,
    LLMProvider,
    SupportsSpeech,
    SupportsStreaming,
    SupportsTranscription,
)

__all__ = [
    "LLMProvider",
    "SupportsStreaming",
    "SupportsTranscription",
    "SupportsSpeech",
    "HasDefaultModel",
]
