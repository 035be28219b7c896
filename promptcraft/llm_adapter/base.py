"""Abstract base class that all LLM providers must implement."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from promptcraft.llm_adapter.models import GenerationConfig, LLMRequest, LLMResponse


class LLMProvider(ABC):
    """
    Contract for LLM providers.

    Every implementation MUST:
    - Forward max_output_tokens, temperature and top_p exactly as given
    - Let transport and service errors propagate (no retry, no fallback text)
    - Return a fully populated LLMResponse including token counts when known
    """

    name: str = "provider"

    @abstractmethod
    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Send a prompt and return the model's response."""

    async def generate_text(
        self,
        prompt: str,
        config: GenerationConfig | None = None,
        model: str = "",
    ) -> LLMResponse:
        """Convenience wrapper: accepts a plain string prompt."""
        request = LLMRequest(
            prompt=prompt,
            config=config or GenerationConfig(),
            model=model,
        )
        return await self.generate(request)


def prompt_hash(prompt: str) -> str:
    return hashlib.sha256(prompt.encode()).hexdigest()
