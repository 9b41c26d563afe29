"""Capability enumeration, detection and negotiation.

Adapters do not enumerate capabilities by hand; they are inferred from the
marker Protocols an adapter satisfies and its ``supports_*()`` predicates.
Detection runs once per client; :func:`require_capability` checks the cached
set before any optional operation is attempted.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Optional

from ..errors import CapabilityError
from ..interfaces import (
    SupportsSpeech,
    SupportsStreaming,
    SupportsTranscription,
)
from ..logging import get_logger, normalized_log_event
from ..log_support import LogContext

CAP_STREAMING = "streaming"
CAP_TRANSCRIPTION = "transcription"
CAP_SPEECH = "speech"

ALL_CAPABILITIES = (CAP_STREAMING, CAP_TRANSCRIPTION, CAP_SPEECH)

_logger = get_logger("alchemind.capabilities")


def _predicate(provider: Any, name: str) -> bool:
    """Return the result of ``provider.<name>()``; absent predicates mean supported."""
    fn = getattr(provider, name, None)
    return True if fn is None else bool(fn())


def detect_capabilities(provider: Any) -> FrozenSet[str]:
    """Return the optional capabilities the provider implements.

    A capability is present when the provider satisfies the marker Protocol
    and its predicate (``supports_streaming()`` and friends) returns True.
    """
    caps: set[str] = set()
    if isinstance(provider, SupportsStreaming) and _predicate(provider, "supports_streaming"):
        caps.add(CAP_STREAMING)
    if isinstance(provider, SupportsTranscription) and _predicate(provider, "supports_transcription"):
        caps.add(CAP_TRANSCRIPTION)
    if isinstance(provider, SupportsSpeech) and _predicate(provider, "supports_speech"):
        caps.add(CAP_SPEECH)
    return frozenset(caps)


def require_capability(
    capabilities: Iterable[str],
    capability: str,
    *,
    provider: str,
    model: Optional[str] = None,
) -> Optional[CapabilityError]:
    """Return a ``CapabilityError`` when ``capability`` is missing, else ``None``.

    The error message reads ``"<Capability> is not supported by the <provider>
    provider."`` and the refusal is logged as ``capability.unsupported``.
    """
    if capability in capabilities:
        return None
    err = CapabilityError(capability, provider=provider)
    normalized_log_event(
        _logger,
        "capability.unsupported",
        LogContext(provider=provider, model=model),
        phase="negotiate",
        error_code=err.code.value,
        emitted=False,
        capability=capability,
    )
    return err


__all__ = [
    "CAP_STREAMING",
    "CAP_TRANSCRIPTION",
    "CAP_SPEECH",
    "ALL_CAPABILITIES",
    "detect_capabilities",
    "require_capability",
]
