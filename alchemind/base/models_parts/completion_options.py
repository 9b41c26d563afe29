"""
CompletionOptions: validated configuration bag for completion calls.

Recognized keys are ``model``, ``temperature`` and ``max_tokens``. Any other
key is preserved as an extra field and forwarded opaquely to the adapter so
newer backend parameters can be used without changes here.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``model_dump``.

Failure modes
-------------
- ``pydantic.ValidationError`` for a negative ``max_tokens`` or values of the
  wrong type. The dispatcher converts it into a ``CompletionError``.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class CompletionOptions(BaseModel):
    """Common completion options shared by every provider.

    Attributes
    ----------
    model:
        Model identifier. Required unless the client carries a default.
    temperature:
        Sampling temperature. Providers clamp it into ``[0.0, 2.0]``.
    max_tokens:
        Non-negative cap on generated tokens.
    """

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def merge(cls, *sources: Optional[Mapping[str, Any]]) -> "CompletionOptions":
        """Merge option mappings left to right and validate the result.

        Later sources win on key conflicts. ``None`` values never override an
        earlier value, so an explicit ``model=None`` at the call site keeps
        the client's default.
        """
        merged: Dict[str, Any] = {}
        for source in sources:
            if not source:
                continue
            if isinstance(source, CompletionOptions):
                source = source.model_dump(exclude_none=True)
            merged.update({k: v for k, v in source.items() if v is not None})
        return cls(**merged)

    def extra_options(self) -> Dict[str, Any]:
        """Return the unrecognized keys carried by this options bag."""
        return dict(self.model_extra or {})


__all__ = ["CompletionOptions"]
