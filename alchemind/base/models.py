"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``alchemind.base.models_parts`` so adapters and callers share one stable
import path.
"""

from typing import Union

from .models_parts.message import Message, Role, ROLES
from .models_parts.completion_options import CompletionOptions
from .models_parts.completion_request import CompletionRequest
from .models_parts.choice import Choice, FinishReason, derive_finish_reason
from .models_parts.completion_response import CompletionResponse
from .models_parts.completion_error import CompletionError, ErrorDetail
from .models_parts.stream_delta import DeltaSink, StreamDelta
from .models_parts.audio import SpeechAudio, Transcription

# Tagged result of every completion call; branch on ``result.ok``.
CompletionResult = Union[CompletionResponse, CompletionError]
TranscriptionResult = Union[Transcription, CompletionError]
SpeechResult = Union[SpeechAudio, CompletionError]

__all__ = [
    "Message",
    "Role",
    "ROLES",
    "CompletionOptions",
    "CompletionRequest",
    "Choice",
    "FinishReason",
    "derive_finish_reason",
    "CompletionResponse",
    "CompletionError",
    "ErrorDetail",
    "CompletionResult",
    "DeltaSink",
    "StreamDelta",
    "SpeechAudio",
    "Transcription",
    "TranscriptionResult",
    "SpeechResult",
]
