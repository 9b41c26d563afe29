"""Helpers for streaming contract tests: scripted starters and a translator."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from alchemind.base.models import StreamDelta


def chunks(
    *parts: Optional[str],
    fail_after: Optional[int] = None,
    finish: Optional[str] = "stop",
) -> Callable[[], Iterable[Any]]:
    """Starter yielding a role chunk, ``parts`` as content, then a finish chunk.

    With ``fail_after=n`` the stream raises a connection reset instead of
    yielding part ``n``.
    """

    def _start() -> Iterable[Any]:
        def _gen():
            yield {"id": "chatcmpl-test", "role": "assistant"}
            for i, part in enumerate(parts):
                if fail_after is not None and i >= fail_after:
                    raise ConnectionResetError("connection reset by peer")
                yield {"content": part}
            if finish is not None:
                yield {"finish_reason": finish}

        return _gen()

    return _start


def dict_translator(chunk: Any) -> Optional[StreamDelta]:
    return StreamDelta(
        content=chunk.get("content"),
        role=chunk.get("role"),
        finish_reason=chunk.get("finish_reason"),
        id=chunk.get("id"),
    )
