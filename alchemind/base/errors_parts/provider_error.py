"""
Structured provider error exception type.

Wraps provider-specific failures with a normalized `ErrorCode` and knows how
to render itself as the public ``CompletionError`` shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models_parts.completion_error import CompletionError
from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        error_type: Backend-declared error type (e.g. ``"invalid_request_error"``).
        backend_code: Backend-declared error code (e.g. ``"invalid_api_key"``).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = "unknown"
    model: Optional[str] = None
    error_type: Optional[str] = None
    backend_code: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"

    def to_completion_error(self) -> CompletionError:
        """Render as ``{"error": {"message", "type", "code"}}``.

        Backend-declared type/code win over the normalized code so callers see
        what the backend actually reported.
        """
        return CompletionError.of(
            self.message,
            type=self.error_type,
            code=self.backend_code or self.code.value,
        )


__all__ = ["ProviderError"]
