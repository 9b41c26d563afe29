"""BaseOpenAIStyleProvider: shared adapter for OpenAI-compatible backends.

Purpose:
- One implementation of non-streaming and streaming chat completions for
  every backend that speaks the OpenAI Chat Completions API.

External dependencies:
- ``openai`` SDK. A fresh SDK client is built per call over a pooled
  ``httpx.Client`` (``alchemind.base.http``), so no mutable per-call state is
  shared between concurrent calls.

Failure semantics:
- A missing API key raises ``InitError`` at construction, before any I/O.
- Backend failures are raised as ``BackendError`` and converted into a
  ``CompletionError`` by the adapter boundary in ``BaseAdapter``.

Timeout strategy:
- Timeouts come from ``get_timeout_config()`` via the pooled HTTP client; the
  SDK's own ``max_retries`` is the only retry policy.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import openai

from ..adapter import BaseAdapter, StreamingAdapterMixin
from ..errors import InitError
from ..http import get_httpx_client
from ..logging import LogContext
from ..models import CompletionRequest, CompletionResponse, StreamDelta
from .client_protocol import _ChatCompletionsClient
from .provider_init import _ProviderInit
from .style_helpers import (
    build_chat_params,
    build_stream_params,
    invoke_create,
    parse_chat_response,
    translate_chunk,
)


class BaseOpenAIStyleProvider(StreamingAdapterMixin, BaseAdapter):
    """Reusable base class for OpenAI-compatible providers.

    Subclasses must implement ``provider_name`` and build a ``_ProviderInit``
    with their default base URL and model. They may override
    ``_make_client`` when the SDK needs extra arguments.
    """

    def __init__(self, init: _ProviderInit) -> None:
        super().__init__(init.params, logger_name=init.logger_name)
        api_key = (init.params.api_key or "").strip()
        if not api_key:
            raise InitError(
                f"The {self.provider_name} provider requires an api_key option "
                f"(or the {self.provider_name.upper()}_API_KEY environment variable).",
                provider=self.provider_name,
            )
        self._api_key = api_key
        self._base_url = init.base_url
        self._organization = init.params.organization
        self._model = init.default_model

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    def _make_client(self) -> _ChatCompletionsClient:
        """Create the SDK client for one call."""
        return openai.OpenAI(
            api_key=self._api_key,
            base_url=self._base_url,
            organization=self._organization,
            http_client=get_httpx_client(self._base_url, self.provider_name),
        )

    # ----- Chat -----

    def _complete(self, request: CompletionRequest, ctx: LogContext) -> CompletionResponse:
        client = self._make_client()
        params = build_chat_params(request, provider_name=self.provider_name)
        resp = invoke_create(client, params, request.model, self.provider_name)
        return parse_chat_response(resp, request, self.provider_name)

    # ----- Streaming -----

    def _open_stream(self, request: CompletionRequest) -> Iterable[Any]:
        client = self._make_client()
        params = build_stream_params(request, provider_name=self.provider_name)
        return invoke_create(client, params, request.model, self.provider_name)

    def _translate_chunk(self, chunk: Any) -> Optional[StreamDelta]:
        return translate_chunk(chunk)


__all__ = ["BaseOpenAIStyleProvider"]
