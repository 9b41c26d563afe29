"""Streaming contract tests.

Covers:
A. Multi-delta happy path (aggregate equals concatenation)
B. Empty completion
C. Mid-stream interruption after partial delivery
D. Sink fault
E. Cancellation between chunks
F. Undecodable chunk
"""
from __future__ import annotations

from typing import List

from alchemind.base.cancellation import CancellationToken
from alchemind.base.models import CompletionError, CompletionResponse, StreamDelta
from alchemind.tests.streaming.helpers import chunks


def test_multi_delta_happy_path(make_session):
    seen: List[StreamDelta] = []
    result = make_session(chunks("A", "B", "C")).run(seen.append)
    if not isinstance(result, CompletionResponse):
        raise AssertionError(f"expected CompletionResponse, got {result!r}")
    contents = [d.content for d in seen if d.content]
    if contents != ["A", "B", "C"]:
        raise AssertionError(f"deltas out of order: {contents}")
    if result.choices[0].message.content != "ABC":
        raise AssertionError("aggregate must equal the concatenation of deltas")
    if result.choices[0].finish_reason != "stop":
        raise AssertionError("untruncated stream must finish with 'stop'")
    if result.id != "chatcmpl-test":
        raise AssertionError("response id should echo the backend id")


def test_empty_completion(make_session):
    seen: List[StreamDelta] = []
    result = make_session(chunks(finish=None)).run(seen.append)
    if not result.ok:
        raise AssertionError("empty stream must still succeed")
    if result.content != "":
        raise AssertionError("empty stream aggregates to empty content, not None")
    if any(d.content for d in seen):
        raise AssertionError("no content deltas expected")


def test_mid_stream_error_keeps_delivered_deltas(make_session):
    seen: List[StreamDelta] = []
    result = make_session(chunks("A", "B", "C", fail_after=2)).run(seen.append)
    if not isinstance(result, CompletionError):
        raise AssertionError("interrupted stream must report failure")
    if [d.content for d in seen if d.content] != ["A", "B"]:
        raise AssertionError("deltas delivered before the fault are not retracted")
    if result.error.code != "transient":
        raise AssertionError(f"expected transient code, got {result.error.code}")
    if "connection reset" not in result.message:
        raise AssertionError("original message should be preserved")


def test_sink_fault_becomes_completion_error(make_session):
    calls: List[str] = []

    def sink(delta: StreamDelta) -> None:
        calls.append(delta.content or "")
        if delta.content == "B":
            raise ValueError("sink exploded")

    session = make_session(chunks("A", "B", "C"))
    result = session.run(sink)
    if not isinstance(result, CompletionError):
        raise AssertionError("sink exception must not propagate")
    if result.error.code != "sink_fault" or result.error.type != "sink_fault":
        raise AssertionError(f"unexpected error shape: {result.to_dict()}")
    if "C" in calls:
        raise AssertionError("no delta may be delivered after the sink failed")
    if session.metrics.emitted != 3:  # role delta + A + B
        raise AssertionError(f"expected 3 delivered deltas, got {session.metrics.emitted}")


def test_sink_runs_before_next_chunk_is_read(make_session):
    order: List[str] = []

    def starter():
        def _gen():
            for part in ("x", "y"):
                order.append(f"read:{part}")
                yield {"content": part}
        return _gen()

    make_session(starter).run(lambda d: order.append(f"sink:{d.content}"))
    if order != ["read:x", "sink:x", "read:y", "sink:y"]:
        raise AssertionError(f"sink must return before the next read: {order}")


def test_cancellation_between_chunks(make_session):
    token = CancellationToken()
    seen: List[StreamDelta] = []

    def sink(delta: StreamDelta) -> None:
        seen.append(delta)
        if delta.content == "A":
            token.cancel("user stop")

    result = make_session(chunks("A", "B"), token=token).run(sink)
    if not isinstance(result, CompletionError):
        raise AssertionError("cancelled stream must report failure")
    if result.error.code != "cancelled" or result.message != "user stop":
        raise AssertionError(f"unexpected cancel shape: {result.to_dict()}")
    if [d.content for d in seen if d.content] != ["A"]:
        raise AssertionError("cancellation must stop delivery")


def test_already_cancelled_token_delivers_nothing(make_session):
    token = CancellationToken()
    token.cancel()
    seen: List[StreamDelta] = []
    result = make_session(chunks("A"), token=token).run(seen.append)
    if result.ok or seen:
        raise AssertionError("pre-cancelled stream must fail without deliveries")


def test_undecodable_chunk_is_malformed_response(make_session):
    def bad_translator(chunk):
        raise KeyError("choices")

    result = make_session(chunks("A"), translator=bad_translator).run(lambda d: None)
    if result.ok or result.error.code != "malformed_response":
        raise AssertionError(f"expected malformed_response, got {result!r}")


def test_start_failure_is_completion_error(make_session):
    def starter():
        raise TimeoutError("read timed out")

    result = make_session(starter).run(lambda d: None)
    if result.ok or result.error.code != "timeout":
        raise AssertionError(f"expected timeout code, got {result!r}")


def test_truncated_stream_reports_length(make_session):
    result = make_session(chunks("A", "B", finish="length"), max_tokens=2).run(lambda d: None)
    if result.choices[0].finish_reason != "length":
        raise AssertionError("truncated stream with max_tokens must finish with 'length'")
    loose = make_session(chunks("A", finish="length")).run(lambda d: None)
    if loose.choices[0].finish_reason != "stop":
        raise AssertionError("'length' requires max_tokens to have been requested")
