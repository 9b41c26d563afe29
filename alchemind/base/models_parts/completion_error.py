"""
CompletionError DTO: the single failure shape returned to callers.

Every failure path (backend errors, missing model, unsupported capability,
sink faults) resolves to ``{"error": {"message": ..., "type": ..., "code": ...}}``.
``type`` and ``code`` are optional and omitted from ``to_dict`` when absent.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ErrorDetail:
    """Body of a completion error."""

    message: str
    type: Optional[str] = None
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message}
        if self.type is not None:
            data["type"] = self.type
        if self.code is not None:
            data["code"] = self.code
        return data


@dataclass(frozen=True)
class CompletionError:
    """Tagged failure result.

    ``ok`` is always ``False`` so callers can branch on
    ``result.ok`` for both this type and ``CompletionResponse``.
    """

    error: ErrorDetail

    ok = False

    @classmethod
    def of(cls, message: str, *, type: Optional[str] = None, code: Optional[str] = None) -> "CompletionError":
        return cls(error=ErrorDetail(message=message, type=type, code=code))

    @property
    def message(self) -> str:
        return self.error.message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error.to_dict()}


__all__ = ["CompletionError", "ErrorDetail"]
