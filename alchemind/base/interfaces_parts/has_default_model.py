"""HasDefaultModel Protocol (single-class module).

Adapters that carry a configured model expose it here; ``new`` copies it onto
the client as ``default_model``.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Interface for adapters constructed with a default model."""

    def default_model(self) -> Optional[str]:  # pragma: no cover - trivial
        """Return the model used when a call names none, or ``None``."""
        return None
