"""chatbot_providers.config.defaults
==================================

Central place for small, stable default values used by the adapters and the
settings loader. Only plain constants live here (no I/O, no imports from
other provider packages) to avoid circular dependencies.
"""

from __future__ import annotations

# ---- Provider selection ----
DEFAULT_PROVIDER = "ollama"

# ---- Ollama (local daemon) ----
OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434"
OLLAMA_DEFAULT_CHAT_MODEL = "llama3"
OLLAMA_DEFAULT_EMBEDDING_MODEL = "nomic-embed-text"
OLLAMA_GENERATE_PATH = "/api/generate"
OLLAMA_EMBEDDINGS_PATH = "/api/embeddings"

# ---- Gemini ----
GEMINI_DEFAULT_CHAT_MODEL = "gemini-2.0-flash-thinking-exp-01-21"
GEMINI_DEFAULT_EMBEDDING_MODEL = "embedding-001"
GEMINI_EMBEDDING_TASK_TYPE = "retrieval_document"
GEMINI_GENERATION_CONFIG = {
    "temperature": 0.7,
    "top_p": 0.8,
    "top_k": 40,
    "max_output_tokens": 2048,
}

# ---- Mock ----
MOCK_DEFAULT_CHAT_MODEL = "mock-chat"
MOCK_DEFAULT_EMBEDDING_MODEL = "mock-embed"
MOCK_EMBEDDING_DIMENSIONS = 8

# ---- CLI ----
CLI_DEFAULT_PROMPT = "Hello, are you working?"
CLI_DEFAULT_EMBED_TEXT = "Test embedding"


__all__ = [
    "DEFAULT_PROVIDER",
    "OLLAMA_DEFAULT_BASE_URL",
    "OLLAMA_DEFAULT_CHAT_MODEL",
    "OLLAMA_DEFAULT_EMBEDDING_MODEL",
    "OLLAMA_GENERATE_PATH",
    "OLLAMA_EMBEDDINGS_PATH",
    "GEMINI_DEFAULT_CHAT_MODEL",
    "GEMINI_DEFAULT_EMBEDDING_MODEL",
    "GEMINI_EMBEDDING_TASK_TYPE",
    "GEMINI_GENERATION_CONFIG",
    "MOCK_DEFAULT_CHAT_MODEL",
    "MOCK_DEFAULT_EMBEDDING_MODEL",
    "MOCK_EMBEDDING_DIMENSIONS",
    "CLI_DEFAULT_PROMPT",
    "CLI_DEFAULT_EMBED_TEXT",
]
