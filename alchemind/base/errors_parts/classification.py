"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, backend error-body extraction, and
message-based heuristics as a fallback so SDK and transport exceptions from
any backend end up in the same ``CompletionError`` shape.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Mapping, Optional, Tuple

from ..models_parts.completion_error import CompletionError
from .error_code import ErrorCode
from .provider_error import ProviderError
from .taxonomy import BackendError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a provider exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_PATTERN_GROUPS = (
    (ErrorCode.TIMEOUT, ("timeout",)),
    (ErrorCode.TIMEOUT, ("timed out",)),
    (ErrorCode.AUTH, ("api key",)),
    (ErrorCode.AUTH, ("unauthorized",)),
    (ErrorCode.AUTH, ("forbidden",)),
    (ErrorCode.UNSUPPORTED, ("not supported",)),
    (ErrorCode.UNSUPPORTED, ("unsupported",)),
    (ErrorCode.NOT_FOUND, ("not found",)),
    (ErrorCode.NOT_FOUND, ("does not exist",)),
    (ErrorCode.UNAVAILABLE, ("unavailable",)),
    (ErrorCode.TRANSIENT, ("connection reset",)),
    (ErrorCode.TRANSIENT, ("connection error",)),
    (ErrorCode.VALIDATION, ("invalid",)),
    (ErrorCode.MALFORMED_RESPONSE, ("malformed",)),
    (ErrorCode.SERVER_ERROR, ("server error",)),
    (ErrorCode.SERVER_ERROR, ("internal error",)),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without an HTTP status."""
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in _PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. HTTP status mapping.
        4. Substring heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    # httpx/openai timeouts do not subclass TimeoutError
    if "timeout" in exc.__class__.__name__.lower():
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def extract_backend_error(exc: BaseException) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Pull ``(message, type, code)`` out of a backend-declared error body.

    Handles both ``{"error": {...}}`` envelopes and bare error objects on
    ``exc.body`` (OpenAI SDK style), then falls back to ``exc.type`` /
    ``exc.code`` attributes. Missing pieces are returned as ``None``.
    """
    body: Any = getattr(exc, "body", None)
    if isinstance(body, Mapping) and isinstance(body.get("error"), Mapping):
        body = body["error"]
    message = error_type = code = None
    if isinstance(body, Mapping):
        message = _str_or_none(body.get("message"))
        error_type = _str_or_none(body.get("type"))
        code = _str_or_none(body.get("code"))
    elif isinstance(body, str) and body.strip():
        message = body.strip()
    error_type = error_type or _str_or_none(getattr(exc, "type", None))
    code = code or _str_or_none(getattr(exc, "code", None))
    return message, error_type, code


def to_completion_error(
    exc: BaseException,
    *,
    provider: str = "unknown",
    model: Optional[str] = None,
) -> CompletionError:
    """Normalize any exception into a ``CompletionError``.

    ``ProviderError`` instances render themselves; anything else is
    classified and enriched with backend-declared message/type/code.
    """
    if isinstance(exc, ProviderError):
        return exc.to_completion_error()
    normalized = classify_exception(exc)
    message, error_type, code = extract_backend_error(exc)
    return CompletionError.of(
        message or str(exc) or exc.__class__.__name__,
        type=error_type,
        code=code or normalized.value,
    )


def backend_error_from(
    exc: BaseException,
    *,
    provider: str,
    model: Optional[str] = None,
) -> ProviderError:
    """Wrap an SDK or transport exception as a ``BackendError``.

    ``ProviderError`` instances pass through untouched. The backend-declared
    message, type and code are kept so the caller sees what the backend said.
    """
    if isinstance(exc, ProviderError):
        return exc
    message, error_type, code = extract_backend_error(exc)
    return BackendError(
        message or str(exc) or exc.__class__.__name__,
        provider=provider,
        model=model,
        code=classify_exception(exc),
        error_type=error_type,
        backend_code=code,
        raw=exc,
    )


def _str_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


__all__ = [
    "classify_exception",
    "extract_backend_error",
    "to_completion_error",
    "backend_error_from",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
