"""Fixtures for streaming contract tests."""
from __future__ import annotations

import pytest

from alchemind.base.logging import LogContext, get_logger
from alchemind.base.streaming import StreamingSession
from alchemind.tests.streaming.helpers import dict_translator


@pytest.fixture()
def make_session():
    """Build a ``StreamingSession`` over a starter with test defaults."""

    def _make(starter, *, translator=dict_translator, max_tokens=None, token=None) -> StreamingSession:
        return StreamingSession(
            ctx=LogContext(provider="fake", model="test"),
            provider_name="fake",
            model="test",
            starter=starter,
            translator=translator,
            logger=get_logger("alchemind.tests.streaming"),
            max_tokens=max_tokens,
            cancellation_token=token,
        )

    return _make
