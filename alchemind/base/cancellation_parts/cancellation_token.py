"""Cooperative cancellation token.

A caller keeps the token and may cancel it from another thread (or from its
own sink); the streaming loop polls it between backend chunks and stops with
``CancelledError`` once cancellation is observed.
"""

from __future__ import annotations

from threading import Lock
from typing import List, Optional

from .cancelled_error import CancelledError
from .state import State


class CancellationToken:
    """Thread-safe cancellation flag with parent-to-child cascading."""

    def __init__(self, *, parent: Optional["CancellationToken"] = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._state.cancelled

    @property
    def reason(self) -> Optional[str]:
        return self._state.reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cancellation; idempotent, cascades to linked children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link ``token`` so cancelling this token cancels it too."""
        with self._lock:
            self._children.append(token)
            already = self._state.cancelled
            reason = self._state.reason
        if already:
            token.cancel(reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def raise_if_cancelled(self, *, provider: str = "unknown") -> None:
        """Raise ``CancelledError`` when cancellation has been requested."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled", provider=provider)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["CancellationToken"]
