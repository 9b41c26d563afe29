"""Streaming primitives: delta aggregation.

The aggregated response of a stream is a pure function of the deltas that
were delivered, so a caller that collected deltas itself can rebuild the same
``CompletionResponse`` the adapter returned.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import CompletionResponse, StreamDelta, derive_finish_reason


def accumulate_deltas(
    deltas: Iterable[StreamDelta],
    *,
    model: str,
    max_tokens: Optional[int] = None,
    id: Optional[str] = None,
) -> CompletionResponse:
    """Fold a delta sequence into one ``CompletionResponse``.

    - Content is the concatenation of every delta's ``content`` in order.
    - The backend finish reason is the last one seen and is normalized with
      :func:`derive_finish_reason` exactly like the non-streaming path.
    - The id is ``id`` when given, else the first backend id seen, else a
      fresh one.
    - Zero deltas produce an empty-content response, never ``None``.
    """
    parts: List[str] = []
    backend_reason: Optional[str] = None
    first_id: Optional[str] = None
    for delta in deltas:
        if delta.content:
            parts.append(delta.content)
        if delta.finish_reason is not None:
            backend_reason = delta.finish_reason
        if first_id is None and delta.id:
            first_id = delta.id
    return CompletionResponse.single(
        model=model,
        content="".join(parts),
        finish_reason=derive_finish_reason(max_tokens, backend_reason),
        id=id or first_id,
    )


__all__ = ["accumulate_deltas"]
