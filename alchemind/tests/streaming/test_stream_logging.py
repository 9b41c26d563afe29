"""Streaming sessions emit one start event and exactly one terminal event."""
from __future__ import annotations

from alchemind.base.logging import REQUIRED_NORMALIZED_KEYS
from alchemind.tests.streaming.helpers import chunks


def _events(log_events, name):
    return [e for e in log_events if e.get("event") == name]


def test_success_logs_start_and_end(make_session, log_events):
    make_session(chunks("A", "B")).run(lambda d: None)
    starts, ends = _events(log_events, "stream.start"), _events(log_events, "stream.end")
    if len(starts) != 1 or len(ends) != 1:
        raise AssertionError(f"expected one start and one end, got {len(starts)}/{len(ends)}")
    end = ends[0]
    for key in REQUIRED_NORMALIZED_KEYS:
        if key not in end:
            raise AssertionError(f"missing normalized key {key!r}")
    if end["emitted"] is not True or end["phase"] != "finalize":
        raise AssertionError(f"unexpected terminal event: {end}")
    if end["provider"] != "fake" or end["model"] != "test":
        raise AssertionError("context fields missing from terminal event")
    if "error_code" in end or _events(log_events, "stream.error"):
        raise AssertionError("successful stream must not carry an error code")


def test_failure_logs_error_with_code(make_session, log_events):
    make_session(chunks("A", "B", fail_after=1)).run(lambda d: None)
    errors = _events(log_events, "stream.error")
    if len(errors) != 1:
        raise AssertionError(f"expected one stream.error, got {len(errors)}")
    if errors[0]["error_code"] != "transient" or errors[0]["emitted"] is not True:
        raise AssertionError(f"unexpected error event: {errors[0]}")
    if _events(log_events, "stream.end"):
        raise AssertionError("failed stream must not log stream.end")
