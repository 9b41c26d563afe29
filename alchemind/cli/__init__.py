"""alchemind command line interface (package entrypoint).

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_capabilities, handle_complete
from .cli_parser import SUBCOMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    p = build_parser()
    # Inject the default subcommand "complete" when omitted.
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if not argv_list or argv_list[0] not in SUBCOMMANDS and argv_list[0] not in {"-h", "--help"}:
        argv_list = ["complete"] + argv_list
    args = p.parse_args(argv_list)

    if args.cmd == "capabilities":
        return handle_capabilities(args)
    return handle_complete(args)


__all__ = ["main"]
