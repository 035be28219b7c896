"""Prompt-engineering techniques on top of a hosted completion service."""

from promptcraft.config import Settings, get_settings, load_settings
from promptcraft.errors import ConfigurationError, PromptcraftError, TemplateError
from promptcraft.llm_adapter import GenerationConfig, LLMProvider, get_llm_provider
from promptcraft.prompting import PromptChain, PromptFunction, PromptTemplate, Stage

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GenerationConfig",
    "LLMProvider",
    "PromptChain",
    "PromptFunction",
    "PromptTemplate",
    "PromptcraftError",
    "Settings",
    "Stage",
    "TemplateError",
    "get_llm_provider",
    "get_settings",
    "load_settings",
]
