"""
Prompt invocation adapter.

Binds one input into a template, sends the text and the generation
settings to the completion provider, and hands back the generated text.

Each invocation is independent: a fresh request is built, sent once and
dropped. Provider errors are logged, counted and re-raised untouched.
"""

from __future__ import annotations

import asyncio
import logging
import time

from promptcraft.llm_adapter import GenerationConfig, LLMProvider, LLMRequest, LLMResponse
from promptcraft.observability.metrics import completion_latency, completions_total, llm_tokens
from promptcraft.prompting.template import PromptTemplate, as_template

logger = logging.getLogger(__name__)


class PromptFunction:
    """A template bound to a provider and a fixed generation config."""

    def __init__(
        self,
        template: PromptTemplate | str,
        provider: LLMProvider,
        config: GenerationConfig | None = None,
        name: str | None = None,
        model: str = "",
    ) -> None:
        self.template = as_template(template)
        self.provider = provider
        self.config = config or GenerationConfig()
        self.name = name or "prompt"
        self.model = model

    def build_request(self, input: str = "") -> LLMRequest:
        return LLMRequest(
            prompt=self.template.bind(input),
            config=self.config,
            model=self.model,
        )

    async def ainvoke_response(self, input: str = "") -> LLMResponse:
        request = self.build_request(input)
        provider_name = self.provider.name

        started = time.perf_counter()
        try:
            response = await self.provider.generate(request)
        except Exception:
            completions_total.labels(provider=provider_name, outcome="error").inc()
            logger.warning(
                "Completion for '%s' failed on provider %s",
                self.name, provider_name, exc_info=True,
            )
            raise
        finally:
            completion_latency.labels(provider=provider_name).observe(
                time.perf_counter() - started
            )

        completions_total.labels(provider=provider_name, outcome="ok").inc()
        if response.prompt_tokens or response.completion_tokens:
            llm_tokens.labels(provider=provider_name, direction="prompt").inc(
                response.prompt_tokens
            )
            llm_tokens.labels(provider=provider_name, direction="completion").inc(
                response.completion_tokens
            )

        logger.info(
            "Completed '%s': %d prompt chars -> %d completion chars (model=%s)",
            self.name, len(request.prompt), len(response.content), response.model,
        )
        return response

    async def ainvoke(self, input: str = "") -> str:
        response = await self.ainvoke_response(input)
        return response.content

    def invoke(self, input: str = "") -> str:
        """Blocking variant of ainvoke for scripts and the CLI."""
        return asyncio.run(self.ainvoke(input))

    def __repr__(self) -> str:
        return f"PromptFunction(name={self.name!r}, provider={self.provider.name!r})"
