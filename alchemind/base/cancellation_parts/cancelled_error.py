"""Cancellation error type.

``CancelledError`` is raised by a streaming loop that observes a cancelled
token. It is a ``ProviderError`` so adapter boundaries turn it into a
``CompletionError`` with ``code="cancelled"`` like any other failure.
"""

from __future__ import annotations

from ..errors_parts.error_code import ErrorCode
from ..errors_parts.provider_error import ProviderError


class CancelledError(ProviderError):
    """Raised when an operation observes a cooperative cancellation request."""

    def __init__(self, reason: str = "operation cancelled", *, provider: str = "unknown") -> None:
        super().__init__(
            code=ErrorCode.CANCELLED,
            message=reason,
            provider=provider,
            error_type="cancelled",
        )


__all__ = ["CancelledError"]
