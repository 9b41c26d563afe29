"""
Choice DTO: one generated alternative inside a completion response.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from .message import Message

FinishReason = Literal["stop", "length"]


@dataclass(frozen=True)
class Choice:
    """A single completion choice.

    Attributes:
        index: Position of the choice (always ``0`` for now).
        message: The assistant message produced by the backend.
        finish_reason: ``"length"`` when generation was cut by ``max_tokens``,
            otherwise ``"stop"``.
    """

    index: int
    message: Message
    finish_reason: Optional[FinishReason] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "message": self.message.to_dict(),
            "finish_reason": self.finish_reason,
        }


def derive_finish_reason(max_tokens: Optional[int], backend_reason: Optional[str]) -> FinishReason:
    """Normalize a backend finish reason into ``"stop"`` or ``"length"``.

    ``"length"`` is only reported when the caller asked for ``max_tokens`` and
    the backend says generation hit that cap.
    """
    if max_tokens is not None and backend_reason == "length":
        return "length"
    return "stop"


__all__ = ["Choice", "FinishReason", "derive_finish_reason"]
