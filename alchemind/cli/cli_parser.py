"""CLI parser construction for the ``alchemind`` command.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..base.factory import ProviderFactory
from ..config.defaults import CLI_DEFAULT_PROVIDER

SUBCOMMANDS = ("complete", "capabilities")


def _str2bool(v: str | None) -> bool:
    """Permissive truthy/falsey parsing for ``--stream [value]``."""
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream`` flags to a parser.

    ``--stream`` accepts an optional boolean and defaults to ``True`` without
    a value; ``--no-stream`` is the explicit negation.
    """
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=False)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def add_provider_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--provider",
        default=CLI_DEFAULT_PROVIDER,
        help=f"provider name ({', '.join(ProviderFactory.supported())})",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``complete`` and ``capabilities``.

    No I/O happens here.
    """
    p = argparse.ArgumentParser(prog="alchemind", description="Run chat completions against LLM providers")
    sub = p.add_subparsers(dest="cmd")

    p_complete = sub.add_parser("complete", help="Run one chat completion (default)")
    add_provider_flag(p_complete)
    p_complete.add_argument("--model", default=None)
    p_complete.add_argument("--prompt", required=True)
    p_complete.add_argument("--system", default=None, help="optional system message")
    p_complete.add_argument("--temperature", type=float, default=None)
    p_complete.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    add_stream_flags(p_complete)
    p_complete.add_argument("--json", action="store_true", help="print the full result as JSON")

    p_caps = sub.add_parser("capabilities", help="Show the optional capabilities of a provider")
    add_provider_flag(p_caps)

    return p
