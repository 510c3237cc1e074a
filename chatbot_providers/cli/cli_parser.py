"""CLI parser construction for providers-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ..config.defaults import CLI_DEFAULT_PROMPT


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``list`` and ``smoke`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(prog="providers-cli", description="Inspect and smoke-test LLM providers")
    sub = p.add_subparsers(dest="cmd", required=True)

    # list
    p_list = sub.add_parser("list", help="List registered providers")
    p_list.add_argument("--json", action="store_true")

    # smoke
    p_smoke = sub.add_parser("smoke", help="Run one chat and one embedding against a provider")
    p_smoke.add_argument("--provider", default=None, help="Provider name (default: LLM_PROVIDER)")
    p_smoke.add_argument("--prompt", default=CLI_DEFAULT_PROMPT)
    p_smoke.add_argument("--skip-embed", action="store_true")
    p_smoke.add_argument("--env-file", default=None, help="Path to a .env file (default: ./.env)")
    p_smoke.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser"]
