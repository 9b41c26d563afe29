"""
CompletionRequest DTO handed to provider adapters.

The dispatcher builds one request per call after merging options and
resolving the model, so adapters never read or mutate shared client state to
serve a single call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass(frozen=True)
class CompletionRequest:
    """Normalized, call-scoped completion request.

    Attributes:
        model: Resolved model identifier.
        messages: Ordered list of canonical messages.
        temperature: Sampling temperature, when set.
        max_tokens: Cap on generated tokens, when set.
        extra: Unrecognized option keys forwarded as-is.
    """

    model: str
    messages: List[Message]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "extra": dict(self.extra),
        }


__all__ = ["CompletionRequest"]
