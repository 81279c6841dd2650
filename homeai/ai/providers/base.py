"""
Base AI Provider - Abstract interface for completion providers.

The command bridge treats the completion service as an opaque remote
function: prompt in, text out. This module defines that contract so
the intent resolver never depends on a specific vendor SDK.

Design Pattern: Strategy Pattern
================================
The base class defines the interface, and each provider implements it.

Example:
    provider = OpenAIProvider()
    response = await provider.generate("Hello, world!", temperature=0)
    if response.success:
        print(response.content)
    else:
        print(response.status_code, response.error)
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Any, Dict, List
from enum import Enum
import logging

logger = logging.getLogger("homeai.ai")


class ProviderType(str, Enum):
    """Enum of supported completion providers."""
    OPENAI = "openai"


@dataclass
class TokenUsage:
    """Token usage statistics for a completion request."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        """Calculate total if not provided."""
        if self.total_tokens == 0:
            self.total_tokens = self.prompt_tokens + self.completion_tokens


@dataclass
class AIResponse:
    """
    Standardized response from a completion provider.

    Providers never raise on remote failures; they return an AIResponse
    with success=False. The caller decides how to surface the failure.

    Attributes:
        content: The generated text
        provider: Which provider generated this response
        model: The specific model used
        usage: Token usage statistics
        latency_ms: How long the request took
        success: Whether the request succeeded
        error: Error message if failed
        status_code: HTTP status of a failed call, when the service sent one
        raw_response: Original provider response (for debugging)
        created_at: Timestamp of the response
    """
    content: str
    provider: ProviderType
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None
    status_code: Optional[int] = None
    raw_response: Optional[Any] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "content": self.content[:100] + "..." if len(self.content) > 100 else self.content,
            "provider": self.provider.value,
            "model": self.model,
            "tokens": {
                "prompt": self.usage.prompt_tokens,
                "completion": self.usage.completion_tokens,
                "total": self.usage.total_tokens,
            },
            "latency_ms": self.latency_ms,
            "success": self.success,
            "error": self.error,
            "status_code": self.status_code,
            "created_at": self.created_at.isoformat(),
        }


class AIProvider(ABC):
    """
    Abstract base class for completion providers.

    Responsibilities:
    - Generate text from a prompt with bounded length and randomness
    - Capture errors (including HTTP status) instead of raising
    - Track token usage and latency
    """

    provider_type: ProviderType

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 150,
        stop: Optional[List[str]] = None,
        **kwargs
    ) -> AIResponse:
        """
        Generate a completion for the prompt.

        Args:
            prompt: The full prompt text
            system_prompt: Optional system instructions for the model
            temperature: Randomness (0 = deterministic)
            max_tokens: Maximum tokens in the response
            stop: Stop sequences that end generation
            **kwargs: Provider-specific options

        Returns:
            AIResponse with the generated content

        Raises:
            This method should NOT raise exceptions.
            Errors are captured in AIResponse.error / AIResponse.status_code
        """
        pass

    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.time() - start_time) * 1000

    def _create_error_response(
        self,
        error: str,
        model: str,
        latency_ms: float = 0.0,
        status_code: Optional[int] = None,
    ) -> AIResponse:
        """Create a standardized error response."""
        logger.error(f"AI Provider Error [{self.provider_type.value}]: {error}")
        return AIResponse(
            content="",
            provider=self.provider_type,
            model=model,
            latency_ms=latency_ms,
            success=False,
            error=error,
            status_code=status_code,
        )

    async def health_check(self) -> bool:
        """
        Check if the provider is available and configured.

        Returns:
            True if provider is ready to use, False otherwise
        """
        try:
            response = await self.generate(
                prompt="Say 'ok' and nothing else.",
                max_tokens=10,
            )
            return response.success and len(response.content) > 0
        except Exception as e:
            logger.error(f"Health check failed for {self.provider_type.value}: {e}")
            return False
