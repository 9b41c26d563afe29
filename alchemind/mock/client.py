"""Deterministic mock provider backed by JSON fixtures for offline use.

Purpose
-------
Implements the adapter contract (blocking and streaming completion) without
any network traffic so callers, the CLI and tests can exercise the full
dispatch path offline. Responses come from the bundled JSON fixture catalog,
optionally overridden through construction options.

Construction options (all optional)
-----------------------------------
``model``
    Default model. The mock has none of its own, so a call without a model
    fails with a missing-model error exactly like a real backend client.
``responses``
    Mapping of prompt (last user message) to reply text, or to
    ``{"text": ..., "stream": [chunks]}``. Merged over the fixture catalog.
``response``
    Reply used when no prompt matches.
``streaming``
    ``False`` turns the streaming capability off.
``fail_with``
    ``{"message", "type", "code"}`` error body raised for every call, as a
    backend would report it.
``fail_after``
    Streaming only: interrupt the stream after this many chunks.

``max_tokens`` truncates the reply to that many whitespace-separated words
and reports ``finish_reason="length"``.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from importlib import resources
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..base.adapter import BaseAdapter, StreamingAdapterMixin
from ..base.dto import AdapterParams
from ..base.errors import BackendError, ErrorCode
from ..base.logging import LogContext
from ..base.models import CompletionRequest, CompletionResponse, StreamDelta, derive_finish_reason

_FIXTURE_RESOURCE = "chat_completions.json"


@dataclass(frozen=True)
class FixtureResponse:
    """A selected reply: full text, the chunks to stream and the finish reason."""

    text: str
    stream: List[str]
    finish_reason: str = "stop"


def load_fixture_catalog(resource: str = _FIXTURE_RESOURCE) -> Dict[str, Any]:
    """Load the JSON fixture catalog bundled under ``alchemind.mock.fixtures``."""
    data = resources.files("alchemind.mock.fixtures").joinpath(resource).read_text(encoding="utf-8")
    return json.loads(data)


class MockProvider(StreamingAdapterMixin, BaseAdapter):
    """Adapter that returns canned responses instead of calling a backend."""

    provider_key = "mock"

    def __init__(self, params: AdapterParams) -> None:
        super().__init__(params, logger_name="alchemind.mock")
        opts = params.extra_options()
        catalog = load_fixture_catalog()
        self._responses: Dict[str, Any] = dict(catalog.get("responses", {}))
        self._responses.update(opts.get("responses") or {})
        if opts.get("response") is not None:
            self._responses["*"] = {"text": str(opts["response"])}
        self._streaming = bool(opts.get("streaming", True))
        self._fail_with: Optional[Mapping[str, Any]] = opts.get("fail_with")
        fail_after = opts.get("fail_after")
        self._fail_after: Optional[int] = int(fail_after) if fail_after is not None else None

    def supports_streaming(self) -> bool:
        return self._streaming

    # ----- Chat -----

    def _complete(self, request: CompletionRequest, ctx: LogContext) -> CompletionResponse:
        self._raise_configured_failure(request)
        entry = self._select_response(request)
        return CompletionResponse.single(
            model=request.model,
            content=entry.text,
            finish_reason=derive_finish_reason(request.max_tokens, entry.finish_reason),
            id=_mock_id(),
        )

    # ----- Streaming -----

    def _open_stream(self, request: CompletionRequest) -> Iterator[Dict[str, Any]]:
        self._raise_configured_failure(request)
        return self._chunks(request, self._select_response(request))

    def _chunks(self, request: CompletionRequest, entry: FixtureResponse) -> Iterator[Dict[str, Any]]:
        chunk_id = _mock_id()
        yield {"id": chunk_id, "role": "assistant"}
        for i, piece in enumerate(entry.stream):
            if self._fail_after is not None and i >= self._fail_after:
                raise ConnectionResetError("mock stream interrupted: connection reset by peer")
            yield {"id": chunk_id, "content": piece}
        yield {"id": chunk_id, "finish_reason": entry.finish_reason}

    def _translate_chunk(self, chunk: Mapping[str, Any]) -> Optional[StreamDelta]:
        return StreamDelta(
            content=chunk.get("content"),
            role=chunk.get("role"),
            finish_reason=chunk.get("finish_reason"),
            id=chunk.get("id"),
            model=None,
        )

    # ----- Helpers -----

    def _raise_configured_failure(self, request: CompletionRequest) -> None:
        if not self._fail_with:
            return
        body = dict(self._fail_with)
        raise BackendError(
            str(body.get("message") or "mock backend failure"),
            provider=self.provider_name,
            model=request.model,
            code=ErrorCode.SERVER_ERROR,
            error_type=body.get("type"),
            backend_code=body.get("code"),
        )

    def _select_response(self, request: CompletionRequest) -> FixtureResponse:
        """Pick the reply for the last user message, honoring ``max_tokens``."""
        prompt = _extract_prompt(request)
        raw = self._responses.get(prompt) or self._responses.get(prompt.lower()) or self._responses.get("*") or ""
        if isinstance(raw, Mapping):
            text = str(raw.get("text", ""))
            stream = [str(c) for c in raw.get("stream") or []]
        else:
            text, stream = str(raw), []
        if not stream:
            stream = _chunk_words(text)
        if request.max_tokens is not None and len(text.split()) > request.max_tokens:
            text, stream = _truncate_words(stream, request.max_tokens)
            return FixtureResponse(text=text, stream=stream, finish_reason="length")
        return FixtureResponse(text=text, stream=stream)


def _chunk_words(text: str) -> List[str]:
    """Split ``text`` into word chunks whose concatenation is ``text``."""
    if not text:
        return []
    words = text.split(" ")
    return [words[0]] + [" " + w for w in words[1:]]


def _truncate_words(stream: List[str], limit: int) -> tuple[str, List[str]]:
    """Keep the leading chunks holding at most ``limit`` words."""
    kept: List[str] = []
    count = 0
    for piece in stream:
        n = len(piece.split())
        if count + n > limit:
            break
        kept.append(piece)
        count += n
    return "".join(kept), kept


def _extract_prompt(request: CompletionRequest) -> str:
    for message in reversed(request.messages):
        if message.role == "user":
            return str(message.content or "").strip() or "*"
    return "*"


def _mock_id() -> str:
    return f"chatcmpl-mock-{uuid.uuid4().hex[:12]}"


__all__ = ["MockProvider", "FixtureResponse", "load_fixture_catalog"]
