"""SupportsTranscription Protocol (single-class module).

Capability marker for providers that can turn audio into text.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from ..models import TranscriptionResult


@runtime_checkable
class SupportsTranscription(Protocol):
    """Capability marker for speech-to-text providers."""

    def supports_transcription(self) -> bool:  # pragma: no cover - trivial
        return True

    def transcribe(self, audio: bytes, options: Mapping[str, Any]) -> TranscriptionResult:  # pragma: no cover - interface
        """Transcribe ``audio`` and return the recognized text."""
        ...
