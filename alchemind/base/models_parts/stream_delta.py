"""
StreamDelta DTO: one incremental update delivered to a streaming sink.

Deltas are transient. They are handed to the sink exactly once, in arrival
order, and are never persisted or replayed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .message import Role


@dataclass(frozen=True)
class StreamDelta:
    """A partial completion update.

    Attributes:
        content: Text fragment, if the chunk carried any.
        role: Author role, usually only present on the first chunk.
        finish_reason: Backend finish reason on the closing chunk.
        id: Backend completion id echoed from the chunk.
        model: Backend model echoed from the chunk.
    """

    content: Optional[str] = None
    role: Optional[Role] = None
    finish_reason: Optional[str] = None
    id: Optional[str] = None
    model: Optional[str] = None

    def is_empty(self) -> bool:
        """True when the delta carries neither content, role nor finish reason."""
        return not self.content and self.role is None and self.finish_reason is None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "content": self.content,
            "role": self.role,
            "finish_reason": self.finish_reason,
            "id": self.id,
            "model": self.model,
        }
        return {k: v for k, v in data.items() if v is not None}


# Single-argument procedure receiving each delta as it arrives.
DeltaSink = Callable[[StreamDelta], Any]


__all__ = ["StreamDelta", "DeltaSink"]
