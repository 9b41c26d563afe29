"""SupportsStreaming Protocol (single-class module).

Capability marker for providers that can stream incremental deltas.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import CompletionRequest, CompletionResult, DeltaSink


@runtime_checkable
class SupportsStreaming(Protocol):
    """Capability marker for providers that can stream incremental deltas.

    Implementations deliver zero or more ``StreamDelta`` objects to ``sink``
    in arrival order, then return exactly one aggregated result. A failure at
    any point, including inside the sink, yields a ``CompletionError``.
    """

    def supports_streaming(self) -> bool:  # pragma: no cover - trivial
        """Return True if the provider supports streaming completions."""
        return True

    def stream_complete(
        self,
        request: CompletionRequest,
        sink: DeltaSink,
        *,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CompletionResult:  # pragma: no cover - interface
        """Stream a completion into ``sink`` and return the aggregate."""
        ...
