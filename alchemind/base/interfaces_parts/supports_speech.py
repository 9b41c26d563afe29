"""SupportsSpeech Protocol (single-class module).

Capability marker for providers that can synthesize speech from text.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from ..models import SpeechResult


@runtime_checkable
class SupportsSpeech(Protocol):
    """Capability marker for text-to-speech providers."""

    def supports_speech(self) -> bool:  # pragma: no cover - trivial
        return True

    def speech(self, text: str, options: Mapping[str, Any]) -> SpeechResult:  # pragma: no cover - interface
        """Synthesize ``text`` and return encoded audio bytes."""
        ...
