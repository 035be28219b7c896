from promptcraft.llm_adapter.base import LLMProvider
from promptcraft.llm_adapter.factory import build_provider, get_llm_provider, reset_provider
from promptcraft.llm_adapter.models import GenerationConfig, LLMRequest, LLMResponse
from promptcraft.llm_adapter.mock_provider import MockProvider

__all__ = [
    "LLMProvider",
    "GenerationConfig",
    "LLMRequest",
    "LLMResponse",
    "MockProvider",
    "build_provider",
    "get_llm_provider",
    "reset_provider",
]
