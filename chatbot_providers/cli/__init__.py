"""Providers CLI (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``; no
provider logic lives here.
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_list, handle_smoke
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 provider failure, 2 configuration error).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.cmd == "list":
        return handle_list(args)
    return handle_smoke(args)


__all__ = ["main"]
