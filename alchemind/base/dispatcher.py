"""Completion dispatcher: the uniform call surface over every provider.

``new`` builds a :class:`Client` once; ``complete`` / ``complete_streaming``
resolve the model, merge options and hand a fresh ``CompletionRequest`` to the
client's adapter. Optional operations (streaming, transcription, speech) are
checked against the capabilities cached on the client before any backend
work starts.

Option merge precedence, lowest to highest (right side wins)::

    client.defaults  <  options mapping  <  keyword options

``None`` never overrides, so ``model=None`` keeps the client default.

Every call returns a tagged result (``result.ok``); only ``new`` raises,
with :class:`InitError`.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Type, Union

from pydantic import ValidationError

from .cancellation import CancellationToken
from .capabilities import (
    CAP_SPEECH,
    CAP_STREAMING,
    CAP_TRANSCRIPTION,
    detect_capabilities,
    require_capability,
)
from .client import Client
from .errors import MissingModelError, ProviderError
from .factory import ProviderFactory
from .interfaces import HasDefaultModel
from .logging import get_logger
from .models import (
    CompletionError,
    CompletionOptions,
    CompletionRequest,
    CompletionResult,
    DeltaSink,
    SpeechResult,
    TranscriptionResult,
)
from .utils.messages import MessageLike, coerce_messages

_logger = get_logger("alchemind.dispatcher")


def new(provider: Union[str, Type[Any]], **options: Any) -> Client:
    """Create a client for ``provider``.

    ``provider`` is a registered name (see ``ProviderFactory.supported()``)
    or an adapter class. ``options`` are construction options (``api_key``,
    ``base_url``, ``model``, ``temperature``, ...) merged over config file
    and environment values.

    Raises:
        InitError: unknown provider or missing/invalid options. No network
            call is made.
    """
    adapter = ProviderFactory.create(provider, options)
    params = getattr(adapter, "params", None)
    default_model = adapter.default_model() if isinstance(adapter, HasDefaultModel) else None
    client = Client(
        provider=adapter.provider_name,
        adapter=adapter,
        default_model=default_model,
        defaults=params.call_defaults() if params is not None else {},
        capabilities=detect_capabilities(adapter),
    )
    _logger.debug(
        "client created provider=%s model=%s capabilities=%s",
        client.provider,
        client.default_model,
        sorted(client.capabilities),
    )
    return client


def complete(
    client: Client,
    messages: Iterable[MessageLike],
    options: Union[Mapping[str, Any], DeltaSink, None] = None,
    *,
    sink: Optional[DeltaSink] = None,
    cancellation_token: Optional[CancellationToken] = None,
    **kw: Any,
) -> CompletionResult:
    """Run a chat completion.

    Non-streaming when no sink is given; otherwise behaves exactly like
    :func:`complete_streaming`. The sink may be passed positionally in place
    of ``options`` (``complete(client, messages, sink)``).
    """
    if sink is None and callable(options) and not isinstance(options, Mapping):
        sink, options = options, None
    if sink is not None:
        return complete_streaming(
            client, messages, sink, options, cancellation_token=cancellation_token, **kw
        )
    request = _build_request(client, messages, options, kw)
    if isinstance(request, CompletionError):
        return request
    return client.adapter.complete(request)


def complete_streaming(
    client: Client,
    messages: Iterable[MessageLike],
    sink: DeltaSink,
    options: Optional[Mapping[str, Any]] = None,
    *,
    cancellation_token: Optional[CancellationToken] = None,
    **kw: Any,
) -> CompletionResult:
    """Stream a chat completion into ``sink`` and return the aggregate.

    Deltas reach ``sink`` in arrival order, each before the next backend
    chunk is read. The returned response's content is the concatenation of
    the delivered deltas. A provider without streaming yields a
    ``CapabilityError`` result; the call never falls back to non-streaming.
    """
    refused = require_capability(client.capabilities, CAP_STREAMING, provider=client.provider)
    if refused is not None:
        return refused.to_completion_error()
    request = _build_request(client, messages, options, kw)
    if isinstance(request, CompletionError):
        return request
    return client.adapter.stream_complete(request, sink, cancellation_token=cancellation_token)


def transcribe(client: Client, audio: bytes, **options: Any) -> TranscriptionResult:
    """Transcribe ``audio`` with the client's provider."""
    refused = require_capability(client.capabilities, CAP_TRANSCRIPTION, provider=client.provider)
    if refused is not None:
        return refused.to_completion_error()
    return client.adapter.transcribe(audio, options)


def speech(client: Client, text: str, **options: Any) -> SpeechResult:
    """Synthesize ``text`` to audio with the client's provider."""
    refused = require_capability(client.capabilities, CAP_SPEECH, provider=client.provider)
    if refused is not None:
        return refused.to_completion_error()
    return client.adapter.speech(text, options)


def supports(client: Client, capability: str) -> bool:
    """Return whether ``client`` can run the optional ``capability``."""
    return client.supports(capability)


def _build_request(
    client: Client,
    messages: Iterable[MessageLike],
    options: Optional[Mapping[str, Any]],
    kw: Mapping[str, Any],
) -> Union[CompletionRequest, CompletionError]:
    """Merge options, resolve the model and normalize messages for one call."""
    if options is not None and not isinstance(options, Mapping):
        return CompletionError.of(
            f"Invalid completion options: expected a mapping, got {type(options).__name__}",
            type="invalid_request_error",
            code="validation",
        )
    try:
        merged = CompletionOptions.merge(client.defaults, options, kw)
    except ValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return CompletionError.of(
            f"Invalid completion options: {detail}",
            type="invalid_request_error",
            code="validation",
        )

    model = merged.model or client.default_model
    if not model:
        return MissingModelError(provider=client.provider).to_completion_error()

    try:
        canonical = coerce_messages(messages)
    except ProviderError as exc:
        return exc.to_completion_error()
    except TypeError as exc:
        # ``messages`` itself is not iterable
        return CompletionError.of(
            f"Invalid messages: {exc}", type="invalid_request_error", code="validation"
        )

    return CompletionRequest(
        model=model,
        messages=canonical,
        temperature=merged.temperature,
        max_tokens=merged.max_tokens,
        extra=merged.extra_options(),
    )


__all__ = ["new", "complete", "complete_streaming", "transcribe", "speech", "supports"]
