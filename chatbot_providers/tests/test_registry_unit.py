from __future__ import annotations

import sys

import pytest

from chatbot_providers.base.dto import ProviderConfig
from chatbot_providers.base.errors import ConfigurationError
from chatbot_providers.base.interfaces import ChatModel, Embedder, ProviderHandle
from chatbot_providers.mock import MockProvider
from chatbot_providers.registry import (
    BUILTIN_PROVIDERS,
    LazyBuiltinHandle,
    ProviderRegistry,
    UnknownProviderError,
    available_providers,
    build_default_registry,
    create_chat,
    create_embedder,
    default_registry,
    load_builtin,
    resolve,
)


def test_register_and_resolve_is_case_insensitive():
    reg = ProviderRegistry()
    handle = MockProvider()
    reg.register("Mock", handle)
    assert reg.resolve("MOCK") is handle  # nosec B101
    assert reg.resolve(" mock ") is handle  # nosec B101
    assert "mOcK" in reg  # nosec B101


def test_unknown_name_lists_registered_names():
    reg = ProviderRegistry()
    reg.register("mock", MockProvider())
    reg.register("other", MockProvider())
    with pytest.raises(UnknownProviderError) as ei:
        reg.resolve("nope")
    msg = str(ei.value)
    assert "nope" in msg and "mock" in msg and "other" in msg  # nosec B101
    assert ei.value.available == ("mock", "other")  # nosec B101
    assert isinstance(ei.value, LookupError)  # nosec B101


def test_rejects_empty_and_duplicate_names():
    reg = ProviderRegistry()
    reg.register("mock", MockProvider())
    with pytest.raises(ValueError):
        reg.register("  ", MockProvider())
    with pytest.raises(ValueError):
        reg.register("MOCK", MockProvider())


def test_freeze_blocks_registration():
    reg = ProviderRegistry()
    reg.register("mock", MockProvider())
    reg.freeze()
    assert reg.frozen  # nosec B101
    with pytest.raises(RuntimeError):
        reg.register("late", MockProvider())
    assert reg.names() == ("mock",)  # nosec B101


def test_default_registry_contains_builtins_and_is_cached():
    reg = default_registry()
    assert reg is default_registry()  # nosec B101
    assert reg.frozen  # nosec B101
    assert reg.names() == tuple(sorted(BUILTIN_PROVIDERS))  # nosec B101
    assert available_providers() == ("gemini", "mock", "ollama")  # nosec B101
    for name in reg.names():
        assert isinstance(reg.resolve(name), ProviderHandle)  # nosec B101
        assert reg.resolve(name).provider_name == name  # nosec B101


def test_credential_flags():
    assert resolve("gemini").requires_credential() is True  # nosec B101
    assert resolve("ollama").requires_credential() is False  # nosec B101
    assert resolve("Mock").requires_credential() is False  # nosec B101


def test_module_helpers_build_capabilities():
    chat = create_chat("mock", ProviderConfig())
    embedder = create_embedder("mock")
    assert isinstance(chat, ChatModel)  # nosec B101
    assert isinstance(embedder, Embedder)  # nosec B101


def test_load_builtin_unknown():
    with pytest.raises(UnknownProviderError):
        load_builtin("openai")
    with pytest.raises(UnknownProviderError):
        resolve("openai")


def test_broken_backend_import_does_not_break_other_providers(monkeypatch):
    monkeypatch.setitem(sys.modules, "google.generativeai", None)
    monkeypatch.delitem(sys.modules, "chatbot_providers.gemini.client", raising=False)
    monkeypatch.delitem(sys.modules, "chatbot_providers.gemini", raising=False)

    reg = build_default_registry()
    assert reg.names() == ("gemini", "mock", "ollama")  # nosec B101
    chat = reg.resolve("ollama").create_chat(ProviderConfig())
    assert isinstance(chat, ChatModel)  # nosec B101

    with pytest.raises(ConfigurationError) as ei:
        reg.resolve("gemini").create_chat(ProviderConfig(api_key="k"))
    assert "chatbot_providers.gemini.client" in ei.value.message  # nosec B101
    assert ei.value.field == "module"  # nosec B101
    assert isinstance(ei.value.__cause__, ImportError)  # nosec B101


def test_lazy_handle_defers_import_until_first_use():
    handle = LazyBuiltinHandle("Mock")
    assert handle.provider_name == "mock"  # nosec B101
    assert handle._handle is None  # nosec B101
    assert handle.requires_credential() is False  # nosec B101
    assert isinstance(handle._handle, MockProvider)  # nosec B101
