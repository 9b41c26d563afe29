"""Tests for canonical message translation helpers."""

from __future__ import annotations

import pytest

from alchemind.base.errors import InvalidMessageError, UnsupportedRoleError
from alchemind.base.models import Message
from alchemind.base.utils.messages import (
    coerce_messages,
    from_openai_messages,
    to_openai_messages,
    translate,
)


def _conversation() -> list[Message]:
    return [
        Message.system("be brief"),
        Message.user("hi"),
        Message.assistant("hello"),
        Message.user("hi"),  # duplicates are allowed
        Message.assistant(None),
    ]


def test_openai_round_trip_preserves_role_and_content():
    msgs = _conversation()
    native = to_openai_messages(msgs)
    assert native[0] == {"role": "system", "content": "be brief"}  # nosec B101 test assertion
    assert from_openai_messages(native) == msgs  # nosec B101 test assertion


def test_translate_is_one_to_one_and_ordered():
    msgs = _conversation()
    mapper = {role: (lambda m: (m.role[0], m.content)) for role in ("system", "user", "assistant")}
    out = translate(msgs, mapper)
    assert out == [("s", "be brief"), ("u", "hi"), ("a", "hello"), ("u", "hi"), ("a", None)]  # nosec B101 test assertion


def test_translate_refuses_roles_missing_from_mapper():
    mapper = {"user": lambda m: m.content}
    with pytest.raises(UnsupportedRoleError) as ei:
        translate([Message.user("a"), Message.system("b")], mapper, provider="fake")
    assert ei.value.role == "system"  # nosec B101 test assertion
    assert ei.value.provider == "fake"  # nosec B101 test assertion


def test_coerce_accepts_mappings_and_messages():
    out = coerce_messages([{"role": "user", "content": "x"}, Message.assistant("y")])
    assert out == [Message.user("x"), Message.assistant("y")]  # nosec B101 test assertion


def test_coerce_rejects_unknown_role():
    with pytest.raises(UnsupportedRoleError):
        coerce_messages([{"role": "tool", "content": "x"}])


def test_coerce_rejects_non_message_items():
    with pytest.raises(InvalidMessageError) as ei:
        coerce_messages(["just a string"])  # type: ignore[list-item]
    error = ei.value.to_completion_error()
    assert error.error.type == "invalid_request_error"  # nosec B101 test assertion
    assert error.error.code == "validation"  # nosec B101 test assertion
