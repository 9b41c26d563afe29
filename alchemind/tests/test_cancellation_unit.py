"""CancellationToken semantics."""

from __future__ import annotations

import pytest

from alchemind.base.cancellation import CancellationToken, CancelledError


def test_cancel_is_idempotent_and_keeps_first_reason():
    token = CancellationToken()
    token.cancel("first")
    token.cancel("second")
    assert token.cancelled  # nosec B101 test assertion
    assert token.reason == "first"  # nosec B101 test assertion


def test_cancel_cascades_to_children():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("stop")
    assert child.cancelled and child.reason == "stop"  # nosec B101 test assertion


def test_child_linked_after_cancel_is_cancelled():
    parent = CancellationToken()
    parent.cancel()
    assert parent.link_child(CancellationToken()).cancelled  # nosec B101 test assertion


def test_raise_if_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("bye")
    with pytest.raises(CancelledError) as ei:
        token.raise_if_cancelled(provider="mock")
    assert ei.value.provider == "mock"  # nosec B101 test assertion
    assert ei.value.to_completion_error().error.code == "cancelled"  # nosec B101 test assertion
