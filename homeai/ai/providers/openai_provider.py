"""
OpenAI Provider - completion client used for intent extraction.

The bridge sends one prompt per command and expects a short JSON
object back. Calls use a small output budget and temperature 0 so
that the same command yields the same intent as often as possible.

Failure mapping:
===============
- openai.APIStatusError (4xx/5xx) -> error response carrying status_code
- openai.APIConnectionError / APITimeoutError -> error response, no status
- Response envelope without choices -> error response

API Documentation: https://platform.openai.com/docs/api-reference
"""

import time
import logging
from typing import Optional, List

from openai import AsyncOpenAI, APIStatusError, APIConnectionError, APITimeoutError

from homeai.core.config import settings
from homeai.ai.providers.base import (
    AIProvider,
    AIResponse,
    ProviderType,
    TokenUsage,
)

logger = logging.getLogger("homeai.ai.openai")


class OpenAIProvider(AIProvider):
    """
    OpenAI chat-completions provider.

    Usage:
        provider = OpenAIProvider()
        response = await provider.generate(
            prompt="Interpret: turn on the lamp",
            temperature=0,
            max_tokens=150,
            stop=["\\n\\n"],
        )
    """

    provider_type = ProviderType.OPENAI

    def __init__(self, model: str = None, api_key: str = None, timeout: float = None):
        """
        Initialize the OpenAI provider.

        Args:
            model: Model name (default: from settings.OPENAI_MODEL)
            api_key: API key (default: from settings.OPENAI_API_KEY)
            timeout: Request timeout in seconds (default: settings.AI_REQUEST_TIMEOUT)
        """
        self.model = model or settings.OPENAI_MODEL
        self.api_key = api_key or settings.OPENAI_API_KEY
        self.timeout = timeout or settings.AI_REQUEST_TIMEOUT

        if self.api_key:
            # No SDK retries: a transient failure surfaces immediately
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
            logger.info(f"OpenAI provider initialized with model: {self.model}")
        else:
            self._client = None
            logger.warning("OpenAI API key not configured - provider unavailable")

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
        Generate a completion using OpenAI.

        Args:
            prompt: The full prompt text
            system_prompt: Optional system instructions
            temperature: Randomness (0 = deterministic)
            max_tokens: Maximum response length
            stop: Stop sequences

        Returns:
            AIResponse with the generated content
        """
        start_time = time.time()

        if not self._client:
            return self._create_error_response(
                error="OpenAI API key not configured",
                model=self.model,
                latency_ms=self._measure_latency(start_time)
            )

        try:
            messages = []
            if system_prompt:
                messages.append({"role": "system", "content": system_prompt})
            messages.append({"role": "user", "content": prompt})

            request = {
                "model": self.model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
            if stop:
                request["stop"] = stop

            response = await self._client.chat.completions.create(**request)

            latency_ms = self._measure_latency(start_time)

            if not response.choices:
                return self._create_error_response(
                    error="No choices in completion response",
                    model=self.model,
                    latency_ms=latency_ms,
                )

            content = response.choices[0].message.content or ""

            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens if response.usage else 0,
                completion_tokens=response.usage.completion_tokens if response.usage else 0,
            )

            logger.info(f"OpenAI request completed in {latency_ms:.0f}ms, tokens: {usage.total_tokens}")

            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=self.model,
                usage=usage,
                latency_ms=latency_ms,
                success=True,
                raw_response=response,
            )

        except APIStatusError as e:
            return self._create_error_response(
                error=str(e),
                model=self.model,
                latency_ms=self._measure_latency(start_time),
                status_code=e.status_code,
            )
        except (APIConnectionError, APITimeoutError) as e:
            return self._create_error_response(
                error=f"Connection to OpenAI failed: {e}",
                model=self.model,
                latency_ms=self._measure_latency(start_time),
            )
        except Exception as e:
            logger.error(f"OpenAI generation failed: {e}")
            return self._create_error_response(
                error=str(e),
                model=self.model,
                latency_ms=self._measure_latency(start_time),
            )


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
openai_provider = OpenAIProvider()
