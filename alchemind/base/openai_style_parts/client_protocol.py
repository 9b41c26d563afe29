"""Protocol for the slice of the OpenAI SDK client the adapters use.

Concrete providers return ``openai.OpenAI`` instances; tests substitute
``SimpleNamespace`` fakes with the same shape.
"""

from __future__ import annotations

from typing import Any, Protocol


class _ChatCompletionsClient(Protocol):
    """OpenAI-compatible client exposing ``chat.completions.create(**params)``.

    The call returns a response with ``choices[0].message`` or, with
    ``stream=True``, an iterator of chunks with ``choices[0].delta``.
    """

    class _ChatNS(Protocol):  # pragma: no cover - structural hint only
        class _CompletionsNS(Protocol):
            def create(self, **params: Any) -> Any:
                ...

        completions: _CompletionsNS

    chat: _ChatNS


__all__ = ["_ChatCompletionsClient"]
