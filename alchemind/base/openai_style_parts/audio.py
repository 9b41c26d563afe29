"""OpenAI audio capabilities: transcription (speech-to-text) and speech (TTS).

Mixed into OpenAI-style providers whose backend serves the ``/audio``
endpoints. Providers without audio simply do not inherit this mixin, so
capability negotiation reports them as unsupported.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ...config.defaults import (
    OPENAI_DEFAULT_SPEECH_FORMAT,
    OPENAI_DEFAULT_SPEECH_MODEL,
    OPENAI_DEFAULT_TRANSCRIPTION_MODEL,
    OPENAI_DEFAULT_VOICE,
)
from ..dto import AdapterParams
from ..errors import backend_error_from
from ..models import SpeechAudio, SpeechResult, Transcription, TranscriptionResult

_TRANSCRIPTION_PASSTHROUGH = ("language", "prompt", "temperature", "response_format")


class OpenAIAudioMixin:
    """``transcribe``/``speech`` over ``client.audio`` of the OpenAI SDK."""

    provider_name: str
    _params: AdapterParams
    _make_client: Callable[[], Any]
    _guarded: Callable[..., Any]

    def supports_transcription(self) -> bool:
        return True

    def supports_speech(self) -> bool:
        return True

    def transcribe(self, audio: bytes, options: Mapping[str, Any]) -> TranscriptionResult:
        """Transcribe ``audio``.

        Options: ``model`` (default ``whisper-1`` or the client's
        ``transcription_model``), ``filename`` (default ``audio.mp3``; the
        extension tells the backend the container format) plus ``language``,
        ``prompt``, ``temperature`` and ``response_format``.
        """
        model = options.get("model") or self._params.transcription_model or OPENAI_DEFAULT_TRANSCRIPTION_MODEL

        def _run() -> Transcription:
            client = self._make_client()
            kwargs = {k: options[k] for k in _TRANSCRIPTION_PASSTHROUGH if options.get(k) is not None}
            try:
                resp = client.audio.transcriptions.create(
                    model=model,
                    file=(options.get("filename") or "audio.mp3", bytes(audio)),
                    **kwargs,
                )
            except Exception as e:  # noqa: BLE001
                raise backend_error_from(e, provider=self.provider_name, model=model) from e
            text = resp if isinstance(resp, str) else getattr(resp, "text", "")
            return Transcription(text=text or "", model=model)

        return self._guarded("transcribe", _run, model=model)

    def speech(self, text: str, options: Mapping[str, Any]) -> SpeechResult:
        """Synthesize ``text``.

        Options: ``model`` (default ``tts-1``), ``voice`` (default ``alloy``),
        ``format`` (default ``mp3``) and ``speed``. Client-level
        ``speech_model``/``voice`` apply when the call does not set them.
        """
        model = options.get("model") or self._params.speech_model or OPENAI_DEFAULT_SPEECH_MODEL
        voice = options.get("voice") or self._params.voice or OPENAI_DEFAULT_VOICE
        fmt = options.get("format") or OPENAI_DEFAULT_SPEECH_FORMAT

        def _run() -> SpeechAudio:
            client = self._make_client()
            kwargs = {"speed": options["speed"]} if options.get("speed") is not None else {}
            try:
                resp = client.audio.speech.create(
                    model=model,
                    voice=voice,
                    input=text,
                    response_format=fmt,
                    **kwargs,
                )
            except Exception as e:  # noqa: BLE001
                raise backend_error_from(e, provider=self.provider_name, model=model) from e
            return SpeechAudio(audio=_read_audio_bytes(resp), model=model, voice=voice, format=fmt)

        return self._guarded("speech", _run, model=model)


def _read_audio_bytes(resp: Any) -> bytes:
    """Return the binary payload of an SDK speech response."""
    payload: Optional[Any] = getattr(resp, "content", None)
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    read = getattr(resp, "read", None)
    if callable(read):
        return bytes(read())
    return bytes(resp)


__all__ = ["OpenAIAudioMixin"]
