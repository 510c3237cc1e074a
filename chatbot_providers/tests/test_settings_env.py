from __future__ import annotations

import os

import pytest

from chatbot_providers.base.errors import ConfigurationError
from chatbot_providers.config import load_settings
from chatbot_providers.config.env import is_placeholder, merged_environment, parse_dotenv
from chatbot_providers.registry import UnknownProviderError


def test_defaults(clean_env):
    s = load_settings(clean_env)
    assert s.provider == "ollama"  # nosec B101
    assert s.timeout_seconds == 60.0  # nosec B101
    cfg = s.provider_config()
    assert cfg.base_url is None and cfg.chat_model is None  # nosec B101
    assert cfg.api_key is None  # nosec B101


def test_ollama_fields_and_millisecond_conversion(clean_env):
    env = {
        **clean_env,
        "LLM_PROVIDER": "Ollama",
        "OLLAMA_BASE_URL": "http://gpu-box:11434",
        "OLLAMA_CHAT_MODEL": "mistral",
        "LLM_TIMEOUT_MS": "1500",
        "LLM_RETRY_ATTEMPTS": "5",
        "LLM_RETRY_STARTING_DELAY_MS": "250",
        "LLM_RETRY_MAX_DELAY_MS": "2000",
    }
    cfg = load_settings(env).provider_config()
    assert cfg.base_url == "http://gpu-box:11434"  # nosec B101
    assert cfg.chat_model == "mistral"  # nosec B101
    assert cfg.timeout_seconds == 1.5  # nosec B101
    assert cfg.max_attempts == 5  # nosec B101
    assert cfg.starting_delay_seconds == 0.25 and cfg.max_delay_seconds == 2.0  # nosec B101


def test_gemini_requires_key(clean_env):
    with pytest.raises(ConfigurationError) as ei:
        load_settings({**clean_env, "LLM_PROVIDER": "gemini"})
    assert ei.value.field == "GEMINI_API_KEY"  # nosec B101


def test_gemini_placeholder_key_counts_as_missing(clean_env):
    with pytest.raises(ConfigurationError):
        load_settings({**clean_env, "LLM_PROVIDER": "gemini", "GEMINI_API_KEY": "your-api-key-here"})


def test_gemini_alias_and_field_scoping(clean_env):
    env = {**clean_env, "LLM_PROVIDER": "gemini", "GOOGLE_API_KEY": "k-123", "OLLAMA_CHAT_MODEL": "mistral"}
    s = load_settings(env)
    cfg = s.provider_config()
    assert cfg.api_key == "k-123"  # nosec B101
    assert cfg.chat_model is None  # nosec B101 - ollama fields stay out
    assert s.provider_config("ollama").api_key is None  # nosec B101


def test_unknown_selector(clean_env):
    with pytest.raises(UnknownProviderError) as ei:
        load_settings({**clean_env, "LLM_PROVIDER": "openai"})
    assert "ollama" in str(ei.value)  # nosec B101


@pytest.mark.parametrize("var", ["LLM_TIMEOUT_MS", "LLM_RETRY_ATTEMPTS"])
def test_malformed_integer(clean_env, var):
    with pytest.raises(ConfigurationError):
        load_settings({**clean_env, var: "soon"})


def test_zero_attempts_rejected(clean_env):
    with pytest.raises(ConfigurationError):
        load_settings({**clean_env, "LLM_RETRY_ATTEMPTS": "0"})


def test_dotenv_merged_under_process_env(tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text(
        "# local overrides\n"
        "export OLLAMA_CHAT_MODEL='phi3'\n"
        "OLLAMA_BASE_URL=\"http://from-file:11434\"\n"
        "GEMINI_API_KEY=changeme\n"
        "not a pair\n",
        encoding="utf-8",
    )
    env = {"OLLAMA_BASE_URL": "http://from-env:11434", "OLLAMA_CHAT_MODEL": ""}
    s = load_settings(env, dotenv_path=str(dotenv))
    assert s.ollama_base_url == "http://from-env:11434"  # nosec B101
    assert s.ollama_chat_model == "phi3"  # nosec B101
    assert s.gemini_api_key is None  # nosec B101


def test_load_settings_does_not_touch_os_environ(tmp_path, monkeypatch):
    monkeypatch.delenv("OLLAMA_CHAT_MODEL", raising=False)
    dotenv = tmp_path / ".env"
    dotenv.write_text("OLLAMA_CHAT_MODEL=phi3\n", encoding="utf-8")
    load_settings(dotenv_path=str(dotenv))
    assert "OLLAMA_CHAT_MODEL" not in os.environ  # nosec B101


def test_env_helpers():
    assert parse_dotenv("A=1\n# c\nB = 'two'\n") == {"A": "1", "B": "two"}  # nosec B101
    assert is_placeholder("CHANGEME") and is_placeholder("test_key")  # nosec B101
    assert not is_placeholder("AIzaSyReal") and not is_placeholder(None)  # nosec B101
    merged = merged_environment({"X": "env", "DOTENV_FILE": "/nonexistent/.env"})
    assert merged["X"] == "env"  # nosec B101


def test_non_credential_values_are_taken_as_given(clean_env):
    env = {
        **clean_env,
        "OLLAMA_BASE_URL": "http://ollama.example.internal:11434",
        "OLLAMA_CHAT_MODEL": "test_llama",
    }
    cfg = load_settings(env).provider_config()
    assert cfg.base_url == "http://ollama.example.internal:11434"  # nosec B101
    assert cfg.chat_model == "test_llama"  # nosec B101


def test_process_value_with_marker_text_beats_dotenv(tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("OLLAMA_BASE_URL=http://from-file:11434\nGEMINI_API_KEY=real-file-key\n", encoding="utf-8")
    env = {"OLLAMA_BASE_URL": "http://gpu.example.com:11434", "GEMINI_API_KEY": "changeme"}
    s = load_settings(env, dotenv_path=str(dotenv))
    assert s.ollama_base_url == "http://gpu.example.com:11434"  # nosec B101
    assert s.gemini_api_key == "real-file-key"  # nosec B101
