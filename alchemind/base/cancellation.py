"""Cooperative cancellation primitives.

``CancellationToken`` is handed to a streaming call by the caller;
``CancelledError`` is what the streaming loop raises once it observes the
request. Implementations live under ``cancellation_parts``.
"""

from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.cancelled_error import CancelledError

__all__ = ["CancellationToken", "CancelledError"]
