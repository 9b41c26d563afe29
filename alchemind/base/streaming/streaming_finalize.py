"""Terminal logging for a streaming call.

Emits exactly one ``stream.end`` or ``stream.error`` event with the collected
metrics, whichever way the stream terminated.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamMetrics


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    error_code: Optional[str] = None,
    error: Optional[str] = None,
) -> None:
    """Log the terminal streaming event.

    ``emitted`` is True when at least one delta reached the sink, which is
    also the signal that a failed stream left partial content behind.
    """
    normalized_log_event(
        logger,
        "stream.end" if error_code is None else "stream.error",
        ctx,
        phase="finalize",
        error_code=error_code,
        emitted=metrics.emitted > 0,
        error=error,
        **metrics.to_dict(),
    )


__all__ = ["finalize_stream"]
