"""Adapter base classes shared by every provider backend.

``BaseAdapter`` owns the adapter boundary for the required ``complete``
capability: it logs the call, runs the backend-specific ``_complete`` and
turns any exception into a ``CompletionError``. ``StreamingAdapterMixin``
adds ``stream_complete`` on top of :class:`StreamingSession`; backends only
supply how to open the native stream and how to translate one chunk.

Optional capabilities are added by mixing in the narrower classes, so
capability detection sees exactly what a backend implements.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Optional, TypeVar

from .cancellation import CancellationToken
from .dto import AdapterParams
from .errors import ProviderError, to_completion_error
from .interfaces import HasDefaultModel, LLMProvider
from .logging import LogContext, get_logger, normalized_log_event
from .models import (
    CompletionError,
    CompletionRequest,
    CompletionResponse,
    CompletionResult,
    DeltaSink,
    StreamDelta,
)
from .streaming import StreamingSession

ResultT = TypeVar("ResultT")


class BaseAdapter(LLMProvider, HasDefaultModel):
    """Common construction and boundary handling for provider adapters.

    Subclasses must define:
    - ``provider_key``: canonical provider identifier. It names the config
      and environment entries and tags the client.
    - ``_complete(request, ctx)``: one blocking backend call returning a
      ``CompletionResponse``; it may raise freely.
    """

    provider_key: str = ""

    def __init__(self, params: AdapterParams, *, logger_name: str) -> None:
        self._params = params
        self._model = params.model
        self._logger = get_logger(logger_name)

    @property
    def provider_name(self) -> str:
        return self.provider_key

    @property
    def params(self) -> AdapterParams:
        return self._params

    def default_model(self) -> Optional[str]:
        return self._model

    # ----- Required capability -----

    def complete(self, request: CompletionRequest) -> CompletionResult:
        """Run one non-streaming completion; never raises."""
        ctx = LogContext(provider=self.provider_name, model=request.model)
        normalized_log_event(
            self._logger,
            "complete.start",
            ctx,
            phase="start",
            emitted=None,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            message_count=len(request.messages),
        )
        t0 = time.perf_counter()
        try:
            response = self._complete(request, ctx)
        except Exception as exc:  # adapter boundary
            return self._fail("complete.error", exc, ctx, t0)
        ctx.response_id = response.id
        normalized_log_event(
            self._logger,
            "complete.end",
            ctx,
            phase="finalize",
            emitted=None,
            latency_ms=_elapsed_ms(t0),
            finish_reason=response.choices[0].finish_reason if response.choices else None,
        )
        return response

    def _complete(self, request: CompletionRequest, ctx: LogContext) -> CompletionResponse:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Boundary helpers -----

    def _guarded(
        self,
        operation: str,
        fn: Callable[[], ResultT],
        *,
        model: Optional[str] = None,
    ) -> ResultT | CompletionError:
        """Run ``fn`` and convert any exception into a ``CompletionError``.

        Used by the optional audio capabilities; logs ``<operation>.start`` and
        ``<operation>.end`` or ``<operation>.error``.
        """
        ctx = LogContext(provider=self.provider_name, model=model)
        normalized_log_event(self._logger, f"{operation}.start", ctx, phase="start", emitted=None)
        t0 = time.perf_counter()
        try:
            result = fn()
        except Exception as exc:  # adapter boundary
            return self._fail(f"{operation}.error", exc, ctx, t0)
        normalized_log_event(
            self._logger,
            f"{operation}.end",
            ctx,
            phase="finalize",
            emitted=None,
            latency_ms=_elapsed_ms(t0),
        )
        return result

    def _fail(self, event: str, exc: BaseException, ctx: LogContext, t0: float) -> CompletionError:
        error = to_completion_error(exc, provider=self.provider_name, model=ctx.model)
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="finalize",
            error_code=exc.code.value if isinstance(exc, ProviderError) else error.error.code,
            emitted=None,
            latency_ms=_elapsed_ms(t0),
            error=error.message,
        )
        return error


class StreamingAdapterMixin:
    """Streaming capability built on :class:`StreamingSession`.

    Mixed into a :class:`BaseAdapter` subclass that implements:
    - ``_open_stream(request)``: start the backend stream and return an
      iterable of native chunks.
    - ``_translate_chunk(chunk)``: map one chunk to a ``StreamDelta`` or
      ``None`` when it carries nothing.
    """

    provider_name: str
    _logger: Any

    def supports_streaming(self) -> bool:
        return True

    def stream_complete(
        self,
        request: CompletionRequest,
        sink: DeltaSink,
        *,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CompletionResult:
        """Stream into ``sink`` and return the aggregated response; never raises."""
        session = StreamingSession(
            ctx=LogContext(provider=self.provider_name, model=request.model),
            provider_name=self.provider_name,
            model=request.model,
            starter=lambda: self._open_stream(request),
            translator=self._translate_chunk,
            logger=self._logger,
            max_tokens=request.max_tokens,
            cancellation_token=cancellation_token,
        )
        return session.run(sink)

    def _open_stream(self, request: CompletionRequest) -> Iterable[Any]:  # pragma: no cover - abstract
        raise NotImplementedError

    def _translate_chunk(self, chunk: Any) -> Optional[StreamDelta]:  # pragma: no cover - abstract
        raise NotImplementedError


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0


__all__ = ["BaseAdapter", "StreamingAdapterMixin"]
