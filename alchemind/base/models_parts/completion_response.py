"""
CompletionResponse DTO representing a successful completion.

The shape mirrors the widely used ``chat.completion`` object so results can
be serialized and compared across providers.
"""
from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .choice import Choice, FinishReason
from .message import Message


@dataclass(frozen=True)
class CompletionResponse:
    """Provider-agnostic completion result.

    Attributes:
        id: Opaque identifier, unique per call.
        model: Echo of the resolved model.
        choices: Ordered choices; exactly one in practice.
        created: Unix timestamp (seconds).
        object: Always ``"chat.completion"``.
    """

    id: str
    model: str
    choices: List[Choice]
    created: int = field(default_factory=lambda: int(time.time()))
    object: str = "chat.completion"

    ok = True

    @classmethod
    def single(
        cls,
        *,
        model: str,
        content: Optional[str],
        finish_reason: FinishReason = "stop",
        id: Optional[str] = None,
        created: Optional[int] = None,
    ) -> "CompletionResponse":
        """Build a response holding one assistant choice at index 0."""
        choice = Choice(
            index=0,
            message=Message(role="assistant", content=content),
            finish_reason=finish_reason,
        )
        return cls(
            id=id or f"chatcmpl-{uuid.uuid4().hex}",
            model=model,
            choices=[choice],
            created=created if created is not None else int(time.time()),
        )

    @property
    def content(self) -> Optional[str]:
        """Content of the first choice, the common case for callers."""
        return self.choices[0].message.content if self.choices else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "object": self.object,
            "created": self.created,
            "model": self.model,
            "choices": [c.to_dict() for c in self.choices],
        }


__all__ = ["CompletionResponse"]
