"""Streaming metrics collected for a single streaming call."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Per-call streaming metrics.

    Attributes:
        emitted: Number of deltas handed to the sink.
        content_chars: Total length of delivered content.
        time_to_first_delta_ms: Latency from start to the first delivered delta.
        total_duration_ms: Wall time of the whole stream, set at finalize.
    """

    emitted: int = 0
    content_chars: int = 0
    time_to_first_delta_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emitted_count": self.emitted,
            "content_chars": self.content_chars,
            "time_to_first_delta_ms": self.time_to_first_delta_ms,
            "total_duration_ms": self.total_duration_ms,
        }


__all__ = ["StreamMetrics"]
