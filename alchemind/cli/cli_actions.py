"""CLI action handlers.

Purpose
-------
Subcommand handlers for the ``alchemind`` CLI. Each handler builds a client
through the public dispatcher, prints its outcome and returns a process exit
code. No top-level side effects; safe to import in tests.

Exit codes
----------
- ``0``: success.
- ``1``: the call returned a ``CompletionError`` (printed as JSON to stderr).
- ``2``: the client could not be created (``InitError``).
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from ..base.capabilities import ALL_CAPABILITIES
from ..base.client import Client
from ..base.dispatcher import complete, complete_streaming, new
from ..base.errors import InitError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Message, StreamDelta
from ..config.env import get_env_var_candidates

_logger = get_logger("alchemind.cli")


def _client_or_exit(provider: str) -> tuple[Optional[Client], int]:
    """Create a client or print the ``InitError`` and return exit code 2."""
    try:
        return new(provider), 0
    except InitError as exc:
        body: Dict[str, Any] = {"error": {"message": exc.message, "type": exc.error_type, "code": exc.code.value}}
        candidates = list(get_env_var_candidates(provider))
        if candidates:
            body["set_one_of_env"] = candidates
        print(json.dumps(body), file=sys.stderr)
        return None, 2


def build_messages(prompt: str, system: Optional[str] = None) -> List[Message]:
    messages: List[Message] = []
    if system:
        messages.append(Message.system(system))
    messages.append(Message.user(prompt))
    return messages


def handle_complete(args: argparse.Namespace) -> int:
    """Execute the ``complete`` subcommand.

    With ``--stream`` deltas are written to stdout as they arrive (unless
    ``--json`` asks for the aggregated result only).
    """
    client, code = _client_or_exit(args.provider)
    if client is None:
        return code

    options = {"model": args.model, "temperature": args.temperature, "max_tokens": args.max_tokens}
    messages = build_messages(args.prompt, args.system)
    ctx = LogContext(provider=client.provider, model=args.model or client.default_model)
    normalized_log_event(_logger, "cli.start", ctx, phase="start", emitted=None, stream=bool(args.stream))

    if args.stream:
        live = not args.json

        def _sink(delta: StreamDelta) -> None:
            if live and delta.content:
                sys.stdout.write(delta.content)
                sys.stdout.flush()

        result = complete_streaming(client, messages, _sink, options)
        if live and result.ok:
            sys.stdout.write("\n")
    else:
        result = complete(client, messages, options)

    if not result.ok:
        normalized_log_event(
            _logger,
            "cli.error",
            ctx,
            phase="finalize",
            error_code=result.error.code,
            emitted=False,
            error=result.message,
        )
        print(json.dumps(result.to_dict()), file=sys.stderr)
        return 1

    normalized_log_event(_logger, "cli.finalize", ctx, phase="finalize", emitted=True)
    if args.json:
        print(json.dumps(result.to_dict()))
    elif not args.stream:
        print(result.content or "")
    return 0


def handle_capabilities(args: argparse.Namespace) -> int:
    """Print the provider's optional capabilities as JSON."""
    client, code = _client_or_exit(args.provider)
    if client is None:
        return code
    print(
        json.dumps(
            {
                "provider": client.provider,
                "default_model": client.default_model,
                "capabilities": {cap: client.supports(cap) for cap in ALL_CAPABILITIES},
            }
        )
    )
    return 0
