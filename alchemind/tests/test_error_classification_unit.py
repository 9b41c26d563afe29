"""Unit tests for error classification and ``CompletionError`` normalization."""

from __future__ import annotations

import types

import pytest

from alchemind.base.errors import (
    BackendError,
    CapabilityError,
    ErrorCode,
    MissingModelError,
    SinkFault,
    backend_error_from,
    classify_exception,
    extract_backend_error,
    to_completion_error,
)


class _StatusError(Exception):
    def __init__(self, msg: str, status: int) -> None:
        super().__init__(msg)
        self.status_code = status


class ReadTimeout(Exception):
    """Name-alike of ``httpx.ReadTimeout`` which does not subclass TimeoutError."""


@pytest.mark.parametrize(
    "exc, expected",
    [
        (_StatusError("x", 401), ErrorCode.AUTH),
        (_StatusError("x", 404), ErrorCode.NOT_FOUND),
        (_StatusError("x", 429), ErrorCode.RATE_LIMIT),
        (_StatusError("x", 503), ErrorCode.UNAVAILABLE),
        (TimeoutError("slow"), ErrorCode.TIMEOUT),
        (ReadTimeout("slow"), ErrorCode.TIMEOUT),
        (RuntimeError("Rate limit exceeded"), ErrorCode.RATE_LIMIT),
        (RuntimeError("invalid api key"), ErrorCode.AUTH),
        (RuntimeError("something odd"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, expected):
    assert classify_exception(exc) == expected  # nosec B101 test assertion


def test_status_on_response_attribute():
    exc = RuntimeError("x")
    exc.response = types.SimpleNamespace(status_code=500)  # type: ignore[attr-defined]
    assert classify_exception(exc) == ErrorCode.SERVER_ERROR  # nosec B101 test assertion


def test_extract_backend_error_envelope_and_bare():
    env = RuntimeError("x")
    env.body = {"error": {"message": "m", "type": "t", "code": "c"}}  # type: ignore[attr-defined]
    bare = RuntimeError("x")
    bare.body = {"message": "m2", "type": "t2"}  # type: ignore[attr-defined]
    text = RuntimeError("x")
    text.body = "  plain failure  "  # type: ignore[attr-defined]
    assert extract_backend_error(env) == ("m", "t", "c")  # nosec B101 test assertion
    assert extract_backend_error(bare) == ("m2", "t2", None)  # nosec B101 test assertion
    assert extract_backend_error(text) == ("plain failure", None, None)  # nosec B101 test assertion


def test_to_completion_error_never_returns_bare_strings():
    err = to_completion_error(ValueError(""))
    assert err.message == "ValueError"  # nosec B101 test assertion
    assert err.to_dict() == {"error": {"message": "ValueError", "code": "unknown"}}  # nosec B101 test assertion


def test_backend_error_from_wraps_and_passes_through():
    wrapped = backend_error_from(_StatusError("nope", 403), provider="openai", model="m")
    assert isinstance(wrapped, BackendError)  # nosec B101 test assertion
    assert wrapped.code == ErrorCode.AUTH  # nosec B101 test assertion
    assert wrapped.model == "m"  # nosec B101 test assertion
    original = MissingModelError(provider="openai")
    assert backend_error_from(original, provider="openai") is original  # nosec B101 test assertion


def test_capability_error_renders_message_only():
    err = CapabilityError("speech", provider="deepseek")
    assert err.to_completion_error().to_dict() == {  # nosec B101 test assertion
        "error": {"message": "Speech is not supported by the deepseek provider."}
    }


def test_sink_fault_keeps_original_exception():
    cause = KeyError("k")
    fault = SinkFault(cause, provider="p")
    assert fault.raw is cause  # nosec B101 test assertion
    assert fault.to_completion_error().error.code == "sink_fault"  # nosec B101 test assertion
