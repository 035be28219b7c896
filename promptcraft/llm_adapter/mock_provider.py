"""
Deterministic mock LLM provider for testing and offline walkthroughs.

Always returns the same output for the same prompt hash, so every example
can run without network access or credentials. Scripted replies may be
supplied to simulate a specific model answer (e.g. in chaining tests).
"""

from __future__ import annotations

from collections.abc import Iterable

from promptcraft.llm_adapter.base import LLMProvider, prompt_hash
from promptcraft.llm_adapter.models import LLMRequest, LLMResponse

_MOCK_PREFIX = "[MOCK] "


class MockProvider(LLMProvider):

    name = "mock"

    def __init__(self, replies: Iterable[str] | None = None) -> None:
        self._replies = list(replies) if replies is not None else []
        self.requests: list[LLMRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def generate(self, request: LLMRequest) -> LLMResponse:
        self.requests.append(request)
        digest = prompt_hash(request.prompt)

        if self._replies:
            content = self._replies.pop(0)
        else:
            content = (
                f"{_MOCK_PREFIX}Deterministic response for prompt hash "
                f"{digest[:12]}."
            )

        fake_prompt_tokens = len(request.prompt.split())
        fake_completion_tokens = min(
            len(content.split()), request.config.max_output_tokens
        )

        return LLMResponse(
            content=content,
            model=request.model or "mock-deterministic",
            prompt_tokens=fake_prompt_tokens,
            completion_tokens=fake_completion_tokens,
            total_tokens=fake_prompt_tokens + fake_completion_tokens,
            finish_reason="stop",
            prompt_hash=digest,
        )
