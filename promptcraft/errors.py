"""Error types raised by promptcraft itself.

Provider and transport failures are NOT wrapped here: whatever the SDK raises
reaches the caller unchanged.
"""

from __future__ import annotations


class PromptcraftError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(PromptcraftError, ValueError):
    """Settings are missing or invalid. Raised at setup time."""


class TemplateError(PromptcraftError, ValueError):
    """A prompt template violates the one-placeholder contract."""
