"""Structured logging: normalized keys, levels and adapter events."""

from __future__ import annotations

import json
import logging

import alchemind
from alchemind import Message
from alchemind.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    normalized_log_event,
)
from alchemind.base.log_support import JsonFormatter


def _named(events, name):
    return [e for e in events if e.get("event") == name]


def test_normalized_event_has_required_keys(log_events):
    logger = get_logger("alchemind.tests")
    normalized_log_event(logger, "unit.test", LogContext(provider="p", model="m"), phase="start")
    event = _named(log_events, "unit.test")[0]
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in event  # nosec B101 test assertion
    assert "error_code" not in event  # nosec B101 test assertion
    assert event["provider"] == "p" and event["model"] == "m"  # nosec B101 test assertion
    assert event["_level"] == logging.INFO  # nosec B101 test assertion


def test_error_code_defaults_to_warning(log_events):
    logger = get_logger("alchemind.tests")
    normalized_log_event(logger, "unit.fail", None, phase="finalize", error_code="timeout", emitted=False)
    event = _named(log_events, "unit.fail")[0]
    assert event["error_code"] == "timeout"  # nosec B101 test assertion
    assert event["_level"] == logging.WARNING  # nosec B101 test assertion


def test_complete_logs_start_and_end(log_events):
    client = alchemind.new("mock", model="m")
    result = alchemind.complete(client, [Message.user("ping")])
    start = _named(log_events, "complete.start")[-1]
    end = _named(log_events, "complete.end")[-1]
    assert start["provider"] == "mock" and start["message_count"] == 1  # nosec B101 test assertion
    assert end["response_id"] == result.id  # nosec B101 test assertion
    assert end["finish_reason"] == "stop"  # nosec B101 test assertion


def test_failures_log_error_events(log_events):
    client = alchemind.new("mock", model="m", fail_with={"message": "down", "code": "overloaded"})
    alchemind.complete(client, [Message.user("ping")])
    error = _named(log_events, "complete.error")[-1]
    assert error["error_code"] == "server_error"  # nosec B101 test assertion
    assert error["error"] == "down"  # nosec B101 test assertion


def test_capability_refusal_is_logged(log_events):
    client = alchemind.new("mock", model="m")
    alchemind.speech(client, "hi")
    event = _named(log_events, "capability.unsupported")[-1]
    assert event["capability"] == "speech"  # nosec B101 test assertion
    assert event["phase"] == "negotiate"  # nosec B101 test assertion


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("alchemind.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "k": 1}), None, None)
    line = json.loads(JsonFormatter().format(record))
    assert line["event"] == "e" and line["k"] == 1  # nosec B101 test assertion
    assert line["level"] == "INFO" and line["logger"] == "alchemind.x"  # nosec B101 test assertion
    plain = logging.LogRecord("alchemind.x", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    assert json.loads(JsonFormatter().format(plain))["msg"] == "hello world"  # nosec B101 test assertion


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "alchemind.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        get_logger("alchemind.tests").info(json.dumps({"event": "to.file"}))
        for h in logger.handlers:
            h.flush()
        assert "to.file" in path.read_text(encoding="utf-8")  # nosec B101 test assertion
    finally:
        configure_logger(level="INFO", file_path=None)
