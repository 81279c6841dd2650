"""
AI Providers Module - completion clients behind a single interface.

    response = await provider.generate(prompt, temperature=0, max_tokens=150)

Only OpenAI is wired today; another vendor is one more AIProvider subclass.
"""

from homeai.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from homeai.ai.providers.openai_provider import OpenAIProvider, openai_provider

__all__ = [
    "AIProvider",
    "AIResponse",
    "ProviderType",
    "TokenUsage",
    "OpenAIProvider",
    "openai_provider",
]
