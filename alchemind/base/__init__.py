"""
Providers base package.

Exports the provider-agnostic contracts, DTOs, the provider factory and the
dispatcher for use by the provider packages and by ``alchemind`` itself:

- Interfaces: required and optional adapter capabilities
- Models (DTOs): messages, options, requests, responses, deltas, errors
- Factory: lazy creation of provider adapters by canonical name
- Dispatcher: ``new`` / ``complete`` / ``complete_streaming`` and friends
"""

from .cancellation import CancellationToken, CancelledError
from .capabilities import CAP_SPEECH, CAP_STREAMING, CAP_TRANSCRIPTION
from .client import Client
from .dispatcher import complete, complete_streaming, new, speech, supports, transcribe
from .factory import ProviderFactory
from .interfaces import (
    HasDefaultModel,
    LLMProvider,
    SupportsSpeech,
    SupportsStreaming,
    SupportsTranscription,
)
from .models import (
    Choice,
    CompletionError,
    CompletionOptions,
    CompletionRequest,
    CompletionResponse,
    CompletionResult,
    Message,
    Role,
    SpeechAudio,
    StreamDelta,
    Transcription,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "Role",
    "Message",
    "CompletionOptions",
    "CompletionRequest",
    "Choice",
    "CompletionResponse",
    "CompletionError",
    "CompletionResult",
    "StreamDelta",
    "Transcription",
    "SpeechAudio",
    # Interfaces
    "LLMProvider",
    "SupportsStreaming",
    "SupportsTranscription",
    "SupportsSpeech",
    "HasDefaultModel",
    # Factory & dispatcher
    "ProviderFactory",
    "Client",
    "new",
    "complete",
    "complete_streaming",
    "transcribe",
    "speech",
    "supports",
    "CAP_STREAMING",
    "CAP_TRANSCRIPTION",
    "CAP_SPEECH",
    # Timeouts & cancellation
    "TimeoutConfig",
    "get_timeout_config",
    "CancellationToken",
    "CancelledError",
]
