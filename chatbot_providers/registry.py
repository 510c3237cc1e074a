"""Provider registry.

Purpose
-------
Map a runtime name string (case-insensitive) to a provider handle. The
default registry is built once, on first use, from a table of built-in
adapters. Each entry is a lazy handle that imports its adapter with
``importlib`` the first time it is used, so importing this module never
pulls in a backend SDK and one broken backend leaves the others usable.

Failure modes
-------------
- Unknown names raise :class:`UnknownProviderError` listing every registered
  name.
- Empty or duplicate names raise ``ValueError``; registering into a frozen
  registry raises ``RuntimeError``.
- A built-in adapter whose module cannot be imported or whose class is
  missing surfaces as ``ConfigurationError`` naming the module, with the
  cause chained, when that provider is first used.
"""

from __future__ import annotations

import threading
from importlib import import_module
from typing import Dict, Optional, Tuple

from .base.dto import ProviderConfig
from .base.errors import ConfigurationError
from .base.interfaces import ChatModel, Embedder, ProviderHandle


class UnknownProviderError(LookupError):
    """Raised when a provider name is not registered."""

    def __init__(self, name: str, available: Tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        listed = ", ".join(self.available) if self.available else "<none>"
        super().__init__(f"Unknown provider '{name}'. Available providers: {listed}")


# Built-in adapters: canonical name -> (module path, class name)
BUILTIN_PROVIDERS: Dict[str, Tuple[str, str]] = {
    "ollama": ("chatbot_providers.ollama.client", "OllamaProvider"),
    "gemini": ("chatbot_providers.gemini.client", "GeminiProvider"),
    "mock": ("chatbot_providers.mock.client", "MockProvider"),
}


def _canonical(name: str) -> str:
    return (name or "").strip().lower()


class ProviderRegistry:
    """Name to provider-handle mapping.

    The mapping is only written during setup; once :meth:`freeze` is called
    concurrent readers need no coordination.
    """

    def __init__(self) -> None:
        self._handles: Dict[str, ProviderHandle] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, handle: ProviderHandle) -> None:
        """Register ``handle`` under ``name`` (stored lowercased)."""
        if self._frozen:
            raise RuntimeError("provider registry is frozen")
        key = _canonical(name)
        if not key:
            raise ValueError("provider name must be a non-empty string")
        if key in self._handles:
            raise ValueError(f"provider '{key}' is already registered")
        self._handles[key] = handle

    def resolve(self, name: str) -> ProviderHandle:
        """Return the handle registered under ``name`` (case-insensitive)."""
        handle = self._handles.get(_canonical(name))
        if handle is None:
            raise UnknownProviderError(name, self.names())
        return handle

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._handles))

    def freeze(self) -> "ProviderRegistry":
        self._frozen = True
        return self

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _canonical(name) in self._handles

    def __len__(self) -> int:
        return len(self._handles)


def load_builtin(name: str) -> ProviderHandle:
    """Import and instantiate the built-in adapter registered as ``name``.

    Raises ``UnknownProviderError`` for names outside the built-in table and
    ``ConfigurationError`` naming the module when the adapter cannot be
    imported (for example a missing SDK).
    """
    key = _canonical(name)
    spec = BUILTIN_PROVIDERS.get(key)
    if spec is None:
        raise UnknownProviderError(name, tuple(sorted(BUILTIN_PROVIDERS)))
    module_path, class_name = spec
    try:
        mod = import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(
            message=f"failed to import module '{module_path}' for provider '{key}': {exc}",
            provider=key,
            field="module",
        ) from exc
    try:
        klass = getattr(mod, class_name)
    except AttributeError as exc:
        raise ConfigurationError(
            message=f"adapter class '{class_name}' not found in '{module_path}'",
            provider=key,
            field="module",
        ) from exc
    return klass()


class LazyBuiltinHandle:
    """Provider handle that imports its built-in adapter on first use.

    Each built-in is loaded independently, so a backend whose SDK fails to
    import only breaks calls to that backend.
    """

    def __init__(self, name: str) -> None:
        self._name = _canonical(name)
        self._handle: Optional[ProviderHandle] = None
        self._lock = threading.Lock()

    def _load(self) -> ProviderHandle:
        if self._handle is None:
            with self._lock:
                if self._handle is None:
                    self._handle = load_builtin(self._name)
        return self._handle

    @property
    def provider_name(self) -> str:
        return self._name

    def requires_credential(self) -> bool:
        return self._load().requires_credential()

    def create_chat(self, config: ProviderConfig) -> ChatModel:
        return self._load().create_chat(config)

    def create_embedder(self, config: ProviderConfig) -> Embedder:
        return self._load().create_embedder(config)


_DEFAULT: Optional[ProviderRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def build_default_registry() -> ProviderRegistry:
    """Return a new frozen registry holding a lazy handle per built-in."""
    registry = ProviderRegistry()
    for name in BUILTIN_PROVIDERS:
        registry.register(name, LazyBuiltinHandle(name))
    return registry.freeze()


def default_registry() -> ProviderRegistry:
    """Return the process-wide frozen registry of built-in providers."""
    global _DEFAULT
    if _DEFAULT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                _DEFAULT = build_default_registry()
    return _DEFAULT


def resolve(name: str) -> ProviderHandle:
    """Resolve ``name`` against the default registry."""
    return default_registry().resolve(name)


def available_providers() -> Tuple[str, ...]:
    return default_registry().names()


def create_chat(name: str, config: Optional[ProviderConfig] = None) -> ChatModel:
    """Resolve ``name`` and build a chat capability from ``config``."""
    return resolve(name).create_chat(config or ProviderConfig())


def create_embedder(name: str, config: Optional[ProviderConfig] = None) -> Embedder:
    """Resolve ``name`` and build an embedding capability from ``config``."""
    return resolve(name).create_embedder(config or ProviderConfig())


__all__ = [
    "UnknownProviderError",
    "ProviderRegistry",
    "BUILTIN_PROVIDERS",
    "load_builtin",
    "LazyBuiltinHandle",
    "build_default_registry",
    "default_registry",
    "resolve",
    "available_providers",
    "create_chat",
    "create_embedder",
]
