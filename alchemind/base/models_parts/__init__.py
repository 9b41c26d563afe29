"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`alchemind.base.models_parts` if needed, while `alchemind.base.models` remains
the primary stable import path.
"""

from .message import Message, Role, ROLES
from .completion_options import CompletionOptions
from .completion_request import CompletionRequest
from .choice import Choice, FinishReason, derive_finish_reason
from .completion_response import CompletionResponse
from .completion_error import CompletionError, ErrorDetail
from .stream_delta import DeltaSink, StreamDelta
from .audio import SpeechAudio, Transcription

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
    "DeltaSink",
    "StreamDelta",
    "SpeechAudio",
    "Transcription",
]
