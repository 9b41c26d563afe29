"""alchemind package

Provider-agnostic access to LLM backends: chat completions (blocking or
streamed through a delta sink), plus transcription and speech where the
backend offers them.

Usage::

    import alchemind
    from alchemind import Message

    client = alchemind.new("openai", api_key="sk-...", model="gpt-4o-mini")
    result = alchemind.complete(client, [Message.user("Hello")], temperature=0.2)
    if result.ok:
        print(result.content)
    else:
        print(result.error.message)

    alchemind.complete_streaming(client, [Message.user("Hi")], lambda d: print(d.content or "", end=""))

Public API (re-exported):
    - Version: ``__version__``
    - Dispatcher: ``new``, ``complete``, ``complete_streaming``,
      ``transcribe``, ``speech``, ``supports``
    - Models: ``Message``, ``CompletionResponse``, ``CompletionError``,
      ``StreamDelta``, ``Transcription``, ``SpeechAudio``
    - Errors: ``ProviderError``, ``ErrorCode``, ``InitError`` and the rest of
      the taxonomy
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.capabilities import CAP_SPEECH, CAP_STREAMING, CAP_TRANSCRIPTION
from .base.client import Client
from .base.dispatcher import complete, complete_streaming, new, speech, supports, transcribe
from .base.errors import (
    BackendError,
    CapabilityError,
    ErrorCode,
    InitError,
    InvalidMessageError,
    MissingModelError,
    ProviderError,
    SinkFault,
    UnsupportedRoleError,
)
from .base.factory import ProviderFactory
from .base.logging import configure_logger
from .base.models import (
    CompletionError,
    CompletionOptions,
    CompletionResponse,
    CompletionResult,
    Message,
    SpeechAudio,
    StreamDelta,
    Transcription,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Dispatcher
    "new",
    "complete",
    "complete_streaming",
    "transcribe",
    "speech",
    "supports",
    "Client",
    "ProviderFactory",
    "CAP_STREAMING",
    "CAP_TRANSCRIPTION",
    "CAP_SPEECH",
    # Models
    "Message",
    "CompletionOptions",
    "CompletionResponse",
    "CompletionError",
    "CompletionResult",
    "StreamDelta",
    "Transcription",
    "SpeechAudio",
    # Errors
    "ProviderError",
    "ErrorCode",
    "InitError",
    "CapabilityError",
    "MissingModelError",
    "BackendError",
    "SinkFault",
    "UnsupportedRoleError",
    "InvalidMessageError",
    # Misc
    "CancellationToken",
    "CancelledError",
    "configure_logger",
]
