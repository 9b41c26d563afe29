"""Client handle returned by :func:`alchemind.new`.

A client is created once per logical backend connection and reused for many
calls. It is frozen: per-call overrides build a fresh ``CompletionRequest``
and never touch the client.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional

from .interfaces import LLMProvider


@dataclass(frozen=True)
class Client:
    """Provider-owned handle carrying the adapter and its cached capabilities.

    Attributes:
        provider: Provider tag used for dispatch (e.g. ``"openai"``).
        adapter: The constructed provider adapter.
        default_model: Model used when a call does not name one.
        defaults: Client-level completion options (lowest merge precedence).
        capabilities: Optional capabilities detected at construction time.
    """

    provider: str
    adapter: LLMProvider
    default_model: Optional[str] = None
    defaults: Mapping[str, Any] = field(default_factory=dict)
    capabilities: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    def supports(self, capability: str) -> bool:
        return capability in self.capabilities

    def __repr__(self) -> str:  # keeps credentials held by the adapter out of reprs
        return (
            f"Client(provider={self.provider!r}, default_model={self.default_model!r}, "
            f"capabilities={sorted(self.capabilities)!r})"
        )


__all__ = ["Client"]
