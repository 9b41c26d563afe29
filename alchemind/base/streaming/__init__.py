"""Streaming package.

Exposes the streaming session loop, delta aggregation, metrics and terminal
logging under one namespace.
"""

from .streaming import accumulate_deltas
from .streaming_metrics import StreamMetrics
from .streaming_finalize import finalize_stream
from .streaming_session import StreamingSession

__all__ = [
    "accumulate_deltas",
    "StreamMetrics",
    "finalize_stream",
    "StreamingSession",
]
