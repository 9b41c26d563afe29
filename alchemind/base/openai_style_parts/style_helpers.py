"""
Helper utilities for OpenAI-style Chat Completions providers.

Purpose:
- Translate a ``CompletionRequest`` into ``chat.completions.create`` params.
- Interpret non-streaming responses and streaming chunks.
- Invoke the SDK and wrap failures as ``BackendError`` with the backend's
  own message/type/code preserved.

No network I/O happens here other than the SDK call in ``invoke_create``.
"""

from __future__ import annotations

import typing as _t

from ...config.defaults import TEMPERATURE_MAX, TEMPERATURE_MIN
from ..errors import BackendError, ErrorCode, backend_error_from
from ..models import CompletionRequest, CompletionResponse, StreamDelta, derive_finish_reason
from ..utils.messages import to_openai_messages


def clamp_temperature(value: _t.Optional[float]) -> _t.Optional[float]:
    """Clamp ``value`` into the closed range accepted by OpenAI-style APIs."""
    if value is None:
        return None
    return min(TEMPERATURE_MAX, max(TEMPERATURE_MIN, float(value)))


def build_chat_params(request: CompletionRequest, *, provider_name: str) -> dict:
    """Assemble parameters for ``client.chat.completions.create(**params)``.

    Unknown options carried in ``request.extra`` are forwarded as-is and never
    override the normalized ``model``/``messages``/``temperature``/``max_tokens``.
    """
    params: dict = dict(request.extra)
    params["model"] = request.model
    params["messages"] = to_openai_messages(request.messages, provider=provider_name)
    temperature = clamp_temperature(request.temperature)
    if temperature is not None:
        params["temperature"] = temperature
    if request.max_tokens is not None:
        params["max_tokens"] = int(request.max_tokens)
    return params


def build_stream_params(request: CompletionRequest, *, provider_name: str) -> dict:
    """Same as :func:`build_chat_params` with ``stream=True``."""
    params = build_chat_params(request, provider_name=provider_name)
    params["stream"] = True
    return params


def invoke_create(client: _t.Any, params: dict, model: str, provider_name: str) -> _t.Any:
    """Call ``chat.completions.create`` and classify failures.

    Raises:
        BackendError: for any SDK or transport failure, carrying the
            classified ``ErrorCode`` and the backend-declared type/code.
    """
    try:
        return client.chat.completions.create(**params)
    except Exception as e:  # noqa: BLE001
        raise backend_error_from(e, provider=provider_name, model=model) from e


def parse_chat_response(resp: _t.Any, request: CompletionRequest, provider_name: str) -> CompletionResponse:
    """Map a non-streaming SDK response to ``CompletionResponse``.

    ``model`` echoes the resolved request model. A response without choices
    is treated as malformed.
    """
    choices = getattr(resp, "choices", None)
    if not choices:
        raise BackendError(
            "backend response contained no choices",
            provider=provider_name,
            model=request.model,
            code=ErrorCode.MALFORMED_RESPONSE,
            error_type="malformed_response",
        )
    first = choices[0]
    message = getattr(first, "message", None)
    content = getattr(message, "content", None)
    created = getattr(resp, "created", None)
    return CompletionResponse.single(
        model=request.model,
        content=content if content is not None else "",
        finish_reason=derive_finish_reason(request.max_tokens, getattr(first, "finish_reason", None)),
        id=getattr(resp, "id", None) or None,
        created=created if isinstance(created, int) else None,
    )


def translate_chunk(chunk: _t.Any) -> _t.Optional[StreamDelta]:
    """Map one streaming chunk to a ``StreamDelta``.

    Chunks without choices (e.g. a trailing usage chunk) yield ``None``.
    """
    choices = getattr(chunk, "choices", None)
    if not choices:
        return None
    first = choices[0]
    delta = getattr(first, "delta", None)
    return StreamDelta(
        content=getattr(delta, "content", None),
        role=getattr(delta, "role", None),
        finish_reason=getattr(first, "finish_reason", None),
        id=getattr(chunk, "id", None),
        model=getattr(chunk, "model", None),
    )


__all__ = [
    "clamp_temperature",
    "build_chat_params",
    "build_stream_params",
    "invoke_create",
    "parse_chat_response",
    "translate_chunk",
]
