"""CLI smoke tests against the offline mock provider; no network I/O."""

from __future__ import annotations

import json
from typing import Any, Dict

import pytest

from alchemind import cli


def test_capabilities_json(capsys) -> None:
    exit_code = cli.main(["capabilities", "--provider", "mock"])
    if exit_code != 0:
        raise AssertionError(f"expected exit 0, got {exit_code}")
    data: Dict[str, Any] = json.loads(capsys.readouterr().out)
    if data["provider"] != "mock":
        raise AssertionError("missing provider in output")
    if data["capabilities"] != {"streaming": True, "transcription": False, "speech": False}:
        raise AssertionError(f"unexpected capabilities: {data['capabilities']}")


def test_complete_prints_content(capsys, monkeypatch) -> None:
    monkeypatch.setenv("MOCK_MODEL", "m")
    exit_code = cli.main(["--provider", "mock", "--prompt", "ping"])
    if exit_code != 0:
        raise AssertionError(f"expected exit 0, got {exit_code}")
    if capsys.readouterr().out.strip() != "pong":
        raise AssertionError("expected fixture reply on stdout")


def test_complete_stream_writes_deltas(capsys) -> None:
    exit_code = cli.main(["complete", "--provider", "mock", "--model", "m", "--prompt", "count to three", "--stream"])
    if exit_code != 0:
        raise AssertionError(f"expected exit 0, got {exit_code}")
    if capsys.readouterr().out != "one two three\n":
        raise AssertionError("streamed output should be the concatenated deltas")


def test_complete_json_output(capsys) -> None:
    exit_code = cli.main(
        ["complete", "--provider", "mock", "--model", "m", "--prompt", "ping", "--max-tokens", "1", "--json"]
    )
    if exit_code != 0:
        raise AssertionError(f"expected exit 0, got {exit_code}")
    data = json.loads(capsys.readouterr().out)
    if data["object"] != "chat.completion" or data["choices"][0]["message"]["content"] != "pong":
        raise AssertionError(f"unexpected JSON result: {data}")


def test_missing_model_exits_one(capsys) -> None:
    exit_code = cli.main(["complete", "--provider", "mock", "--prompt", "ping"])
    if exit_code != 1:
        raise AssertionError(f"expected exit 1, got {exit_code}")
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    if err["error"]["code"] != "missing_model":
        raise AssertionError(f"unexpected error body: {err}")


def test_missing_key_exits_two(capsys) -> None:
    exit_code = cli.main(["complete", "--provider", "openai", "--prompt", "hi"])
    if exit_code != 2:
        raise AssertionError(f"expected exit 2, got {exit_code}")
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    if "OPENAI_API_KEY" not in err.get("set_one_of_env", []):
        raise AssertionError("expected env var hint in stderr")


def test_prompt_is_required() -> None:
    with pytest.raises(SystemExit) as ei:
        cli.main(["complete", "--provider", "mock"])
    if ei.value.code != 2:
        raise AssertionError("argparse should exit with code 2")
