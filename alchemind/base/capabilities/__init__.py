"""Capabilities package.

Exports capability constants plus detection and negotiation helpers.
"""

from .core import (
    ALL_CAPABILITIES,
    CAP_SPEECH,
    CAP_STREAMING,
    CAP_TRANSCRIPTION,
    detect_capabilities,
    require_capability,
)

__all__ = [
    "CAP_STREAMING",
    "CAP_TRANSCRIPTION",
    "CAP_SPEECH",
    "ALL_CAPABILITIES",
    "detect_capabilities",
    "require_capability",
]
