"""
OpenAI-compatible LLM provider.

Works with any API that speaks the OpenAI Chat Completions protocol:
  - OpenAI      (base_url=https://api.openai.com/v1)
  - Azure       (azure_endpoint + api_version, model = deployment name)
  - Groq        (base_url=https://api.groq.com/openai/v1)
  - Google      (base_url=https://generativelanguage.googleapis.com/v1beta/openai)
  - OpenRouter  (base_url=https://openrouter.ai/api/v1)
  - local       (any OpenAI-compatible server, e.g. Ollama / LM Studio)

Generation parameters are forwarded unmodified. SDK retries are disabled:
a failed call raises the SDK's exception straight to the caller.
"""

from __future__ import annotations

import asyncio
import logging

import httpx
from openai import AsyncAzureOpenAI, AsyncOpenAI

from promptcraft.config import Settings
from promptcraft.errors import ConfigurationError
from promptcraft.llm_adapter.base import LLMProvider, prompt_hash
from promptcraft.llm_adapter.models import LLMRequest, LLMResponse

logger = logging.getLogger(__name__)

_BASE_URLS: dict[str, str] = {
    "openai":     "https://api.openai.com/v1",
    "groq":       "https://api.groq.com/openai/v1",
    "gemini":     "https://generativelanguage.googleapis.com/v1beta/openai/",
    "openrouter": "https://openrouter.ai/api/v1",
}

_DEFAULT_MODELS: dict[str, str] = {
    "openai":     "gpt-4o-mini",
    "groq":       "llama-3.3-70b-versatile",
    "gemini":     "gemini-2.0-flash",
    "openrouter": "meta-llama/llama-3.3-70b-instruct:free",
}


class OpenAIProvider(LLMProvider):
    """
    OpenAI Chat Completions adapter.

    Each request is sent as a single user message; the completion text of the
    first choice is returned.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = "",
        model: str = "",
        provider_name: str = "openai",
        timeout: float = 120.0,
        api_version: str = "",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.name = provider_name

        # Local servers often don't check the key; the SDK still wants one.
        if not api_key and provider_name == "local":
            api_key = "local-placeholder-key"
        elif not api_key:
            raise ConfigurationError(
                f"An API key is required for provider '{provider_name}'. "
                "Set LLM_API_KEY (or OPENAI_API_KEY) in your environment."
            )

        self._model = model or _DEFAULT_MODELS.get(provider_name, "gpt-4o-mini")

        if provider_name == "azure":
            if not base_url:
                raise ConfigurationError("Provider 'azure' needs an endpoint.")
            client_kwargs = {
                "azure_endpoint": base_url,
                "api_version": api_version,
            }
        else:
            client_kwargs = {
                "base_url": base_url or _BASE_URLS.get(provider_name, _BASE_URLS["openai"]),
            }
        client_kwargs.update(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self._client_kwargs = client_kwargs
        self._client: AsyncOpenAI | None = None
        self._client_loop: asyncio.AbstractEventLoop | None = None

    def _client_for_running_loop(self) -> AsyncOpenAI:
        """Return the SDK client bound to the current event loop.

        The httpx pool behind the SDK client belongs to the loop that opened
        its connections. Each blocking invoke/run starts a new loop, so the
        client is rebuilt when the loop changes. A caller-supplied
        http_client is owned by the caller and never rebuilt.
        """
        loop = asyncio.get_running_loop()
        if self._client is not None and (
            self._client_loop is loop or self._client_kwargs["http_client"] is not None
        ):
            return self._client

        if self._client is not None:
            logger.debug("Event loop changed; rebuilding %s client", self.name)
        client_cls = AsyncAzureOpenAI if self.name == "azure" else AsyncOpenAI
        self._client = client_cls(**self._client_kwargs)
        self._client_loop = loop
        return self._client

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> OpenAIProvider:
        return cls(
            api_key=settings.api_key,
            base_url=settings.service_endpoint,
            model=settings.chat_model_name,
            provider_name=settings.provider,
            timeout=settings.request_timeout,
            api_version=settings.api_version,
            http_client=http_client,
        )

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, request: LLMRequest) -> LLMResponse:
        model = request.model or self._model
        config = request.config

        logger.debug(
            "Sending completion request to %s (model=%s, max_tokens=%d)",
            self.name, model, config.max_output_tokens,
        )
        client = self._client_for_running_loop()
        response = await client.chat.completions.create(
            model=model,
            max_tokens=config.max_output_tokens,
            temperature=config.temperature,
            top_p=config.top_p,
            messages=[{"role": "user", "content": request.prompt}],
        )

        choice = response.choices[0]
        usage = response.usage

        return LLMResponse(
            content=choice.message.content or "",
            model=response.model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            finish_reason=choice.finish_reason or "",
            prompt_hash=prompt_hash(request.prompt),
        )
