"""DeepSeek and xAI share the OpenAI-style adapter but lack audio."""

from __future__ import annotations

import pytest

import alchemind
from alchemind import InitError


@pytest.mark.parametrize(
    "provider, base_url",
    [("deepseek", "https://api.deepseek.com"), ("xai", "https://api.x.ai/v1")],
)
def test_defaults_and_capabilities(provider, base_url):
    client = alchemind.new(provider, api_key="k")
    assert client.provider == provider  # nosec B101 test assertion
    assert client.default_model  # nosec B101 test assertion
    assert client.adapter.base_url.startswith(base_url)  # nosec B101 test assertion
    assert client.capabilities == frozenset({"streaming"})  # nosec B101 test assertion


@pytest.mark.parametrize("provider", ["deepseek", "xai"])
def test_transcription_is_refused(provider):
    client = alchemind.new(provider, api_key="k")
    result = alchemind.transcribe(client, b"audio")
    assert result.message == f"Transcription is not supported by the {provider} provider."  # nosec B101 test assertion


def test_xai_accepts_grok_alias(monkeypatch):
    monkeypatch.setenv("GROK_API_KEY", "xai-real-key")
    client = alchemind.new("xai")
    assert client.adapter._api_key == "xai-real-key"  # nosec B101 test assertion


def test_missing_key_is_init_error():
    with pytest.raises(InitError):
        alchemind.new("deepseek")
