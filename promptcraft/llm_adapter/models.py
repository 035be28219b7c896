"""Data models for the LLM adapter layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenerationConfig(BaseModel):
    """Sampling parameters sent with every request, passed through unmodified."""

    model_config = ConfigDict(frozen=True)

    max_output_tokens: int = Field(default=500, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_p: float = Field(default=0.5, ge=0.0, le=1.0)


class LLMRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str
    config: GenerationConfig = Field(default_factory=GenerationConfig)
    # Empty means "use the provider's configured model".
    model: str = ""


class LLMResponse(BaseModel):
    content: str
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    finish_reason: str = ""
    prompt_hash: str = ""
