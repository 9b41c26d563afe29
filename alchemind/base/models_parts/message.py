"""
Message DTO used across providers.

Defines the immutable `Message` dataclass and the `Role` literal representing
the author of a conversation turn. Ordering of messages in a sequence is
meaningful (conversation order) and duplicates are allowed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional, Tuple


# Message roles understood by every provider adapter.
Role = Literal["system", "user", "assistant"]

ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    """A single canonical conversation turn.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content. ``None`` is permitted for assistant
            turns that carried no text.
    """

    role: Role
    content: Optional[str] = None

    @classmethod
    def system(cls, content: Optional[str]) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: Optional[str]) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: Optional[str]) -> "Message":
        return cls(role="assistant", content=content)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        """Build a message from a ``{"role": ..., "content": ...}`` mapping.

        The role is not validated here; translation into a provider's native
        shape rejects unknown roles so they are never silently dropped.
        """
        return cls(role=str(data.get("role")), content=data.get("content"))  # type: ignore[arg-type]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {"role": self.role, "content": self.content}


__all__ = [
    "Message",
    "Role",
    "ROLES",
]
