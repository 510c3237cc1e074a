"""Action handlers for providers-cli.

Each handler takes the parsed ``argparse.Namespace`` and returns a process
exit code:

- ``0``: success.
- ``1``: the provider call failed (degraded chat answer or embedding error).
- ``2``: configuration problem (unknown provider, missing key, bad number).

Errors are printed as JSON to stderr; results go to stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from typing import Any, Dict, Mapping, Optional

from ..base.constants import ERROR_APOLOGY, TIMEOUT_APOLOGY
from ..base.errors import ConfigurationError, ProviderError
from ..base.models import Message
from ..config import load_settings
from ..config.defaults import CLI_DEFAULT_EMBED_TEXT
from ..config.env import ENV_PROVIDER
from ..registry import UnknownProviderError, available_providers, resolve

_APOLOGIES = frozenset({TIMEOUT_APOLOGY, ERROR_APOLOGY})


def handle_list(args: argparse.Namespace) -> int:
    """Print the registered provider names."""
    names = available_providers()
    if args.json:
        rows = []
        for n in names:
            try:
                rows.append({"name": n, "requires_credential": resolve(n).requires_credential()})
            except ConfigurationError as exc:
                rows.append({"name": n, "requires_credential": None, "error": exc.message})
        print(json.dumps({"providers": rows}))
    else:
        for n in names:
            print(n)
    return 0


async def run_smoke(provider: str, prompt: str, *, settings_env: Mapping[str, str], env_file: Optional[str], skip_embed: bool) -> Dict[str, Any]:
    """Run one chat (and optionally one embedding) and return a result record.

    Raises ``ConfigurationError``/``UnknownProviderError`` before any call is
    issued; provider call failures are reported in the record.
    """
    settings = load_settings({**settings_env, ENV_PROVIDER: provider}, dotenv_path=env_file)
    handle = resolve(settings.provider)
    config = settings.provider_config()
    chat = handle.create_chat(config)
    embedder = None if skip_embed else handle.create_embedder(config)

    result: Dict[str, Any] = {"provider": handle.provider_name, "model": getattr(chat, "model", None)}
    answer = await chat.answer_question([Message.user(prompt)])
    result["chat"] = answer.content
    result["chat_ok"] = answer.content not in _APOLOGIES
    ok = result["chat_ok"]

    if embedder is not None:
        try:
            emb = await embedder.embed(CLI_DEFAULT_EMBED_TEXT)
        except ProviderError as exc:
            result["embed_ok"] = False
            result["embed_error"] = exc.message
            ok = False
        else:
            result["embed_ok"] = True
            result["embedding_dimensions"] = emb.dimensions
    result["ok"] = ok
    return result


def handle_smoke(args: argparse.Namespace, env: Optional[Mapping[str, str]] = None) -> int:
    """Smoke-test a provider end to end and report the outcome."""
    base_env = dict(os.environ if env is None else env)
    provider = args.provider or base_env.get(ENV_PROVIDER) or ""
    try:
        result = asyncio.run(
            run_smoke(
                provider,
                args.prompt,
                settings_env=base_env,
                env_file=args.env_file,
                skip_embed=args.skip_embed,
            )
        )
    except (ConfigurationError, UnknownProviderError) as exc:
        print(json.dumps({"error": str(exc), "type": type(exc).__name__}), file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result))
    else:
        name = result["provider"]
        print(f"[{name}] chat {'ok' if result['chat_ok'] else 'fail'}: {result['chat']}")
        if "embed_ok" in result:
            if result["embed_ok"]:
                print(f"[{name}] embedding ok: {result['embedding_dimensions']} dimensions")
            else:
                print(f"[{name}] embedding fail: {result['embed_error']}")
    return 0 if result["ok"] else 1


__all__ = ["handle_list", "handle_smoke", "run_smoke"]
