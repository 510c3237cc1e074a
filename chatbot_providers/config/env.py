"""chatbot_providers.config.env
=============================

Environment variable names and small helpers for reading them.

Purpose
-------
- Single source of truth for the variables the settings loader reads.
- Parse a ``.env`` file into a mapping and merge it *under* a process
  environment snapshot. ``os.environ`` is never written.

Design Notes
------------
- Gemini has used both ``GEMINI_API_KEY`` and ``GOOGLE_API_KEY``; the
  canonical name comes first in ``ENV_ALIASES`` and wins when both are set.
- Placeholder values (``changeme``, ``your-api-key-here``...) are treated as
  unset so a copied sample ``.env`` never passes for a real credential.

Failure Modes
-------------
- A missing ``.env`` file yields an empty mapping.
- Malformed ``.env`` lines (no ``=``) are skipped.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

ENV_PROVIDER = "LLM_PROVIDER"
ENV_OLLAMA_BASE_URL = "OLLAMA_BASE_URL"
ENV_OLLAMA_CHAT_MODEL = "OLLAMA_CHAT_MODEL"
ENV_OLLAMA_EMBEDDING_MODEL = "OLLAMA_EMBEDDING_MODEL"
ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_GEMINI_CHAT_MODEL = "GEMINI_CHAT_MODEL"
ENV_GEMINI_EMBEDDING_MODEL = "GEMINI_EMBEDDING_MODEL"
ENV_TIMEOUT_MS = "LLM_TIMEOUT_MS"
ENV_RETRY_ATTEMPTS = "LLM_RETRY_ATTEMPTS"
ENV_RETRY_STARTING_DELAY_MS = "LLM_RETRY_STARTING_DELAY_MS"
ENV_RETRY_MAX_DELAY_MS = "LLM_RETRY_MAX_DELAY_MS"
ENV_DOTENV_FILE = "DOTENV_FILE"

# Variable → ordered tuple of acceptable names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    ENV_GEMINI_API_KEY: (ENV_GEMINI_API_KEY, "GOOGLE_API_KEY"),
}

# Credential variables; only these are screened for placeholder values
CREDENTIAL_VARS = frozenset(ENV_ALIASES[ENV_GEMINI_API_KEY])

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example", "your-api-key", "your_api_key")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder or test value.

    Heuristics: contains one of the known markers or starts with ``test_``.
    Case-insensitive; surrounding whitespace is ignored.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return any(marker in v for marker in _PLACEHOLDER_MARKERS) or v.startswith("test_")


def parse_dotenv(text: str) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines, ignoring comments and blank lines.

    Surrounding single or double quotes are stripped from values and an
    optional leading ``export`` is accepted.
    """
    out: Dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        k = k.strip()
        if k.startswith("export "):
            k = k[len("export "):].strip()
        v = v.strip().strip('"').strip("'")
        if k:
            out[k] = v
    return out


def read_dotenv(path: str) -> Dict[str, str]:
    """Read and parse the ``.env`` file at ``path``; empty when absent."""
    if not os.path.isfile(path):
        return {}
    with open(path, "r", encoding="utf-8") as fh:
        return parse_dotenv(fh.read())


def merged_environment(env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> Dict[str, str]:
    """Return ``.env`` values overlaid by the process environment.

    ``env`` defaults to a snapshot of ``os.environ``. ``dotenv_path``
    defaults to ``$DOTENV_FILE`` or ``.env`` in the working directory. A
    process value wins unless it is empty, or is a placeholder credential.
    """
    base = dict(os.environ if env is None else env)
    path = dotenv_path or base.get(ENV_DOTENV_FILE) or ".env"
    merged = read_dotenv(path)
    for k, v in base.items():
        if k not in merged or (v and not (k in CREDENTIAL_VARS and is_placeholder(v))):
            merged[k] = v
    return merged


def get_env_var_candidates(name: str) -> Iterable[str]:
    """Yield ``name`` followed by any aliases."""
    yield name
    for alias in ENV_ALIASES.get(name, ()):
        if alias != name:
            yield alias


def lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    """Return the first non-blank value among ``name`` and its aliases.

    Placeholder values count as unset for credential variables only; URLs
    and model names are taken as given.
    """
    for candidate in get_env_var_candidates(name):
        val = env.get(candidate)
        if val is None:
            continue
        val = val.strip()
        if not val:
            continue
        if candidate in CREDENTIAL_VARS and is_placeholder(val):
            continue
        return val
    return None


__all__ = [
    "ENV_PROVIDER",
    "ENV_OLLAMA_BASE_URL",
    "ENV_OLLAMA_CHAT_MODEL",
    "ENV_OLLAMA_EMBEDDING_MODEL",
    "ENV_GEMINI_API_KEY",
    "ENV_GEMINI_CHAT_MODEL",
    "ENV_GEMINI_EMBEDDING_MODEL",
    "ENV_TIMEOUT_MS",
    "ENV_RETRY_ATTEMPTS",
    "ENV_RETRY_STARTING_DELAY_MS",
    "ENV_RETRY_MAX_DELAY_MS",
    "ENV_DOTENV_FILE",
    "ENV_ALIASES",
    "CREDENTIAL_VARS",
    "is_placeholder",
    "parse_dotenv",
    "read_dotenv",
    "merged_environment",
    "get_env_var_candidates",
    "lookup",
]
