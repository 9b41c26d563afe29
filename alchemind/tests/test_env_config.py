"""Configuration layering: defaults, config file, environment, overrides."""

from __future__ import annotations

import json

import pytest

import alchemind
from alchemind import InitError
from alchemind.config import get_model, get_provider_config, reset_config_cache
from alchemind.config.env import get_env_var_candidates, is_placeholder, resolve_provider_key


def test_builtin_defaults():
    cfg = get_provider_config("deepseek")
    assert cfg["model"] == "deepseek-chat"  # nosec B101 test assertion
    assert cfg["base_url"].startswith("https://api.deepseek.com")  # nosec B101 test assertion
    assert get_provider_config("mock") == {}  # nosec B101 test assertion


def test_precedence_file_then_env_then_overrides(monkeypatch, tmp_path):
    path = tmp_path / "alchemind.yaml"
    path.write_text("openai:\n  model: from-file\n  temperature: 0.2\n  base_url: http://file\n", encoding="utf-8")
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_model("openai") == "from-file"  # nosec B101 test assertion

    monkeypatch.setenv("OPENAI_MODEL", "from-env")
    cfg = get_provider_config("openai")
    assert cfg["model"] == "from-env"  # nosec B101 test assertion
    assert cfg["temperature"] == 0.2  # nosec B101 test assertion

    cfg = get_provider_config("openai", {"model": "explicit", "base_url": None})
    assert cfg["model"] == "explicit"  # nosec B101 test assertion
    assert cfg["base_url"] == "http://file"  # nosec B101 test assertion


def test_json_config_file(monkeypatch, tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"mock": {"model": "m-json"}}), encoding="utf-8")
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    client = alchemind.new("mock")
    assert client.default_model == "m-json"  # nosec B101 test assertion


def test_config_file_defaults_reach_client(monkeypatch, tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("mock:\n  model: m\n  temperature: 0.4\n", encoding="utf-8")
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    client = alchemind.new("mock")
    assert dict(client.defaults) == {"temperature": 0.4}  # nosec B101 test assertion


def test_unparseable_config_file_is_init_error(monkeypatch, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("openai: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    with pytest.raises(InitError):
        alchemind.new("mock")


def test_non_mapping_config_file_is_init_error(monkeypatch, tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    monkeypatch.setenv("ALCHEMIND_CONFIG_FILE", str(path))
    reset_config_cache()
    with pytest.raises(InitError):
        get_provider_config("openai")


def test_dotenv_file_is_loaded_once(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('# comment\nDEEPSEEK_API_KEY="sk-dotenv"\n', encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    reset_config_cache()
    assert get_provider_config("deepseek")["api_key"] == "sk-dotenv"  # nosec B101 test assertion


def test_placeholder_keys_are_ignored(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "your-key-placeholder")
    assert is_placeholder("your-key-placeholder")  # nosec B101 test assertion
    assert resolve_provider_key("openai") == (None, None)  # nosec B101 test assertion
    with pytest.raises(InitError):
        alchemind.new("openai")


def test_env_var_candidates():
    assert list(get_env_var_candidates("xai")) == ["XAI_API_KEY", "GROK_API_KEY"]  # nosec B101 test assertion
    assert list(get_env_var_candidates("mock")) == []  # nosec B101 test assertion
