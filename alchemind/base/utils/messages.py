"""Message translation helpers shared across providers.

Adapters translate canonical ``Message`` sequences into their native message
type through :func:`translate`. The mapping is pure, one-to-one and
order-preserving, and it refuses unknown roles instead of dropping them.
Helpers here must be side-effect free.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, TypeVar, Union

from ..errors import InvalidMessageError, UnsupportedRoleError
from ..models import ROLES, Message

NativeT = TypeVar("NativeT")

MessageLike = Union[Message, Mapping[str, Any]]


def coerce_messages(messages: Iterable[MessageLike]) -> List[Message]:
    """Accept ``Message`` objects or ``{"role", "content"}`` mappings.

    Raises:
        UnsupportedRoleError: for a role outside ``system``/``user``/``assistant``.
        InvalidMessageError: for items that are neither messages nor mappings.
    """
    out: List[Message] = []
    for item in messages:
        if isinstance(item, Message):
            msg = item
        elif isinstance(item, Mapping):
            msg = Message.from_dict(item)
        else:
            raise InvalidMessageError(item)
        if msg.role not in ROLES:
            raise UnsupportedRoleError(msg.role)
        out.append(msg)
    return out


def translate(
    messages: Sequence[Message],
    mapper: Mapping[str, Callable[[Message], NativeT]],
    *,
    provider: str = "unknown",
) -> List[NativeT]:
    """Map canonical messages to a provider's native type.

    Parameters:
        messages: Canonical messages in conversation order.
        mapper: Role name to constructor for the native message type.
        provider: Provider name used in the error when a role is unknown.

    Returns:
        Native messages, one per input message, same order.

    Raises:
        UnsupportedRoleError: when a message role has no entry in ``mapper``.
    """
    native: List[NativeT] = []
    for message in messages:
        build = mapper.get(message.role)
        if build is None:
            raise UnsupportedRoleError(message.role, provider=provider)
        native.append(build(message))
    return native


def _openai_message(message: Message) -> Dict[str, Any]:
    return {"role": message.role, "content": message.content}


OPENAI_ROLE_MAP: Dict[str, Callable[[Message], Dict[str, Any]]] = {
    role: _openai_message for role in ROLES
}


def to_openai_messages(messages: Sequence[Message], *, provider: str = "openai") -> List[Dict[str, Any]]:
    """Translate canonical messages into OpenAI-style ``{"role", "content"}`` dicts."""
    return translate(messages, OPENAI_ROLE_MAP, provider=provider)


def from_openai_messages(native: Iterable[Mapping[str, Any]]) -> List[Message]:
    """Inverse of :func:`to_openai_messages`."""
    return coerce_messages(native)


__all__ = [
    "MessageLike",
    "coerce_messages",
    "translate",
    "to_openai_messages",
    "from_openai_messages",
    "OPENAI_ROLE_MAP",
]
