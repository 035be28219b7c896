"""
Provider factory -- single entry point for building the completion backend.

Reads the provider from Settings (LLM_PROVIDER, default: 'mock') and returns
one shared provider instance. The connection (endpoint + credentials) is
established once and reused read-only by every invocation.

Supported providers:

  mock        Built-in deterministic mock, no API key needed (default)
  openai      OpenAI API  -- needs LLM_API_KEY or OPENAI_API_KEY
  azure       Azure OpenAI -- needs LLM_API_KEY, LLM_BASE_URL and
                            LLM_MODEL (the chat deployment name)
  groq        Groq API    -- needs LLM_API_KEY
  gemini      Google AI   -- needs LLM_API_KEY
  openrouter  OpenRouter  -- needs LLM_API_KEY
  local       Any OpenAI-compatible local server at LLM_BASE_URL
                            e.g. Ollama / LM Studio (no key required)

Model can be overridden globally with the LLM_MODEL env var.
"""

from __future__ import annotations

import logging

from promptcraft.config import Settings, get_settings
from promptcraft.llm_adapter.base import LLMProvider
from promptcraft.llm_adapter.mock_provider import MockProvider

logger = logging.getLogger(__name__)

_instance: LLMProvider | None = None


def build_provider(settings: Settings) -> LLMProvider:
    """Build a fresh provider for the given settings (no singleton)."""
    settings.validate()

    if settings.provider == "mock":
        return MockProvider()

    from promptcraft.llm_adapter.openai_provider import OpenAIProvider

    return OpenAIProvider.from_settings(settings)


def get_llm_provider(settings: Settings | None = None) -> LLMProvider:
    """
    Return the process-wide provider, building it on first call.

    Args:
        settings: Explicit settings; defaults to get_settings().
    """
    global _instance
    if _instance is not None:
        return _instance

    settings = settings or get_settings()
    _instance = build_provider(settings)
    logger.info(
        "LLM provider initialized: %s",
        settings.provider,
        extra={"_extra": settings.redacted()},
    )
    return _instance


def reset_provider() -> None:
    """Reset the singleton (for testing)."""
    global _instance
    _instance = None
