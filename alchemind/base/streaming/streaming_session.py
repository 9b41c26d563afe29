"""Streaming session: the loop shared by every streaming adapter.

Adapters supply two callables:

``starter()``
    Opens the backend stream and returns an iterable of native chunks.
``translator(chunk)``
    Maps one native chunk to a ``StreamDelta`` (or ``None`` to skip it).

:class:`StreamingSession` drives the stream, hands each non-empty delta to the
caller's sink before reading the next chunk, polls the cancellation token
between chunks and resolves to exactly one result: the aggregated
``CompletionResponse`` or a ``CompletionError``. Deltas already delivered are
never retracted when the stream fails later.
"""
from __future__ import annotations

import logging
import time
from contextlib import ExitStack, suppress
from typing import Any, Callable, Iterable, List, Optional

from ..cancellation import CancellationToken
from ..errors import BackendError, ErrorCode, ProviderError, SinkFault, to_completion_error
from ..logging import LogContext, normalized_log_event
from ..models import CompletionResult, DeltaSink, StreamDelta
from .streaming import accumulate_deltas
from .streaming_finalize import finalize_stream
from .streaming_metrics import StreamMetrics


class StreamingSession:
    """One streaming call from start to terminal result."""

    def __init__(
        self,
        *,
        ctx: LogContext,
        provider_name: str,
        model: str,
        starter: Callable[[], Iterable[Any]],
        translator: Callable[[Any], Optional[StreamDelta]],
        logger: logging.Logger,
        max_tokens: Optional[int] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        self.ctx = ctx
        self.provider_name = provider_name
        self.model = model
        self.max_tokens = max_tokens
        self._starter = starter
        self._translator = translator
        self._logger = logger
        self._token = cancellation_token
        self.metrics = StreamMetrics()
        self.delivered: List[StreamDelta] = []

    def run(self, sink: DeltaSink) -> CompletionResult:
        """Drive the stream into ``sink`` and return the terminal result."""
        t0 = time.perf_counter()
        normalized_log_event(self._logger, "stream.start", self.ctx, phase="start", emitted=False)
        try:
            with ExitStack() as stack:
                stream = self._starter()
                _register_stream_cleanup(stream, stack)
                for chunk in stream:
                    self._check_cancelled()
                    delta = self._translate(chunk)
                    if delta is None or delta.is_empty():
                        continue
                    self._deliver(sink, delta, t0)
                self._check_cancelled()
        except Exception as exc:  # adapter boundary: everything becomes a CompletionError
            return self._fail(exc, t0)

        self.metrics.total_duration_ms = _elapsed_ms(t0)
        response = accumulate_deltas(
            self.delivered,
            model=self.model,
            max_tokens=self.max_tokens,
            id=self.ctx.response_id,
        )
        finalize_stream(logger=self._logger, ctx=self.ctx, metrics=self.metrics)
        return response

    def _check_cancelled(self) -> None:
        if self._token is not None:
            self._token.raise_if_cancelled(provider=self.provider_name)

    def _translate(self, chunk: Any) -> Optional[StreamDelta]:
        try:
            delta = self._translator(chunk)
        except Exception as exc:
            raise BackendError(
                f"could not decode stream chunk: {exc}",
                provider=self.provider_name,
                model=self.model,
                code=ErrorCode.MALFORMED_RESPONSE,
                error_type="malformed_response",
                raw=exc,
            ) from exc
        if delta is not None and delta.id and not self.ctx.response_id:
            self.ctx.response_id = delta.id
        return delta

    def _deliver(self, sink: DeltaSink, delta: StreamDelta, t0: float) -> None:
        if self.metrics.emitted == 0:
            self.metrics.time_to_first_delta_ms = _elapsed_ms(t0)
        # Counted before the sink runs: a sink that raises has still seen it.
        self.metrics.emitted += 1
        self.metrics.content_chars += len(delta.content or "")
        self.delivered.append(delta)
        if self._logger.isEnabledFor(logging.DEBUG):
            normalized_log_event(
                self._logger,
                "stream.delta",
                self.ctx,
                phase="mid_stream",
                emitted=True,
                level=logging.DEBUG,
                delta_len=len(delta.content or ""),
            )
        try:
            sink(delta)
        except Exception as exc:
            raise SinkFault(exc, provider=self.provider_name, model=self.model) from exc

    def _fail(self, exc: BaseException, t0: float) -> CompletionResult:
        self.metrics.total_duration_ms = _elapsed_ms(t0)
        error = to_completion_error(exc, provider=self.provider_name, model=self.model)
        code = exc.code.value if isinstance(exc, ProviderError) else error.error.code
        finalize_stream(
            logger=self._logger,
            ctx=self.ctx,
            metrics=self.metrics,
            error_code=code,
            error=error.message,
        )
        return error


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0


def _register_stream_cleanup(stream: Any, stack: ExitStack) -> None:
    """Close the native stream on exit when it exposes ``close()``."""
    close_fn = getattr(stream, "close", None)
    if callable(close_fn):
        def _safe_close() -> None:
            with suppress(Exception):
                close_fn()
        stack.callback(_safe_close)


__all__ = ["StreamingSession"]
