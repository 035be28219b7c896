"""
Process-wide, read-only settings for the completion service.

Loaded once from the environment (optionally seeded from a .env file) and
passed explicitly to the provider factory. Nothing mutates a Settings
instance after it is built.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from promptcraft.errors import ConfigurationError

KNOWN_PROVIDERS = ("mock", "openai", "azure", "groq", "gemini", "openrouter", "local")

# Providers that can run without an API key.
_KEYLESS = {"mock", "local"}

DEFAULT_AZURE_API_VERSION = "2024-06-01"


@dataclass(frozen=True)
class Settings:
    provider: str = "mock"
    chat_model_name: str = ""
    embedding_model_name: str = ""
    service_endpoint: str = ""
    api_key: str = ""
    api_version: str = DEFAULT_AZURE_API_VERSION
    request_timeout: float = 120.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get("LLM_REQUEST_TIMEOUT", "120")
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"LLM_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc

        return cls(
            provider=env.get("LLM_PROVIDER", "mock").strip().lower(),
            chat_model_name=env.get("LLM_MODEL", ""),
            embedding_model_name=env.get("LLM_EMBEDDING_MODEL", ""),
            service_endpoint=env.get("LLM_BASE_URL", ""),
            api_key=env.get("LLM_API_KEY", "") or env.get("OPENAI_API_KEY", ""),
            api_version=env.get("LLM_API_VERSION", "") or DEFAULT_AZURE_API_VERSION,
            request_timeout=timeout,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> Settings:
        """Raise ConfigurationError if the settings cannot reach a provider."""
        if self.provider not in KNOWN_PROVIDERS:
            raise ConfigurationError(
                f"Unknown LLM provider '{self.provider}'. "
                f"Available: {', '.join(KNOWN_PROVIDERS)}"
            )
        if self.provider not in _KEYLESS and not self.api_key:
            raise ConfigurationError(
                f"An API key is required for provider '{self.provider}'. "
                "Set LLM_API_KEY (or OPENAI_API_KEY) in your environment."
            )
        if self.provider in ("azure", "local") and not self.service_endpoint:
            raise ConfigurationError(
                f"Provider '{self.provider}' needs LLM_BASE_URL to be set."
            )
        if self.provider == "azure" and not self.chat_model_name:
            raise ConfigurationError(
                "Provider 'azure' needs LLM_MODEL set to the chat deployment name."
            )
        if not math.isfinite(self.request_timeout) or self.request_timeout <= 0:
            raise ConfigurationError("LLM_REQUEST_TIMEOUT must be a positive, finite number.")
        return self

    def redacted(self) -> dict[str, object]:
        """Settings as a dict safe to log."""
        return {
            "provider": self.provider,
            "chat_model_name": self.chat_model_name or "provider-default",
            "embedding_model_name": self.embedding_model_name or None,
            "service_endpoint": self.service_endpoint or None,
            "api_key": "***" if self.api_key else None,
            "request_timeout": self.request_timeout,
        }


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Read settings from the environment, seeding it from a .env file first.

    Variables already present in the environment win over the .env file.
    """
    load_dotenv(dotenv_path, override=False)
    return Settings.from_env().validate()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings loaded on first use. Never reloads."""
    return load_settings()
