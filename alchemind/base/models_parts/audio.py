"""
Result DTOs for the optional audio capabilities.

``Transcription`` carries the text recognized from an audio payload;
``SpeechAudio`` carries synthesized audio bytes. Failures for both use
``CompletionError``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Transcription:
    """Text recognized from an audio payload."""

    text: str
    model: Optional[str] = None

    ok = True


@dataclass(frozen=True)
class SpeechAudio:
    """Synthesized speech audio.

    Attributes:
        audio: Raw encoded audio bytes.
        model: Speech model used.
        voice: Voice preset used.
        format: Container/codec name (e.g. ``"mp3"``).
    """

    audio: bytes
    model: Optional[str] = None
    voice: Optional[str] = None
    format: Optional[str] = None

    ok = True


__all__ = ["Transcription", "SpeechAudio"]
