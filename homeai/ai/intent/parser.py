"""
Intent Resolver - Extracts {action, device} intents from commands.

The resolver:
1. Rejects empty commands before any network traffic
2. Builds a prompt embedding the current inventory snapshot
3. Calls the completion provider (bounded output, temperature 0)
4. Parses the reply as JSON into an Intent

Failure kinds are kept apart:
- EmptyCommand: nothing to interpret
- RemoteCallFailed: the completion call itself failed (status if known)
- MalformedIntent: the call worked but the text is not a valid intent

The resolver does not check the intent against the inventory.
"""

import json
import logging
import time
import uuid
from typing import Optional

from pydantic import ValidationError

from homeai.core.config import settings
from homeai.core.errors import EmptyCommand, MalformedIntent, RemoteCallFailed
from homeai.ai.providers import AIProvider, openai_provider
from homeai.ai.prompts.intent_prompts import INTENT_STOP_SEQUENCES, build_intent_prompt
from homeai.ai.intent.schemas import Intent
from homeai.ai.monitoring import CommandMonitor, command_monitor
from homeai.inventory import DeviceInventory, device_inventory

logger = logging.getLogger("homeai.ai.intent")


class IntentResolver:
    """
    Turns a raw command string into a structured Intent.

    Usage:
        resolver = IntentResolver()
        intent = await resolver.resolve("turn on the living room lights")
        print(intent.action, intent.device)
    """

    def __init__(
        self,
        provider: Optional[AIProvider] = None,
        inventory: Optional[DeviceInventory] = None,
        monitor: Optional[CommandMonitor] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        self.provider = provider or openai_provider
        self.inventory = inventory if inventory is not None else device_inventory
        self.monitor = monitor or command_monitor
        self.max_tokens = max_tokens if max_tokens is not None else settings.INTENT_MAX_TOKENS
        self.temperature = temperature if temperature is not None else settings.INTENT_TEMPERATURE

    async def resolve(self, command: str, request_id: Optional[str] = None) -> Intent:
        """
        Resolve a natural language command into an Intent.

        Args:
            command: The user's command text
            request_id: Optional tracing id (generated when absent)

        Returns:
            Intent with the action and device exactly as the model returned them

        Raises:
            EmptyCommand: If the command is empty or whitespace only
            RemoteCallFailed: If the completion call fails
            MalformedIntent: If the reply is not a valid intent object
        """
        if command is None or not command.strip():
            raise EmptyCommand()

        request_id = request_id or str(uuid.uuid4())
        start_time = time.time()
        logger.info(f"[{request_id}] Resolving command: {command[:50]}")

        prompt = build_intent_prompt(command, self.inventory.to_prompt_payload())

        self.monitor.track_request(
            request_id=request_id,
            prompt=prompt,
            provider=self.provider.provider_type.value,
            model=getattr(self.provider, "model", "unknown"),
        )

        response = await self.provider.generate(
            prompt=prompt,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            stop=INTENT_STOP_SEQUENCES,
        )

        self.monitor.track_response_from_ai_response(request_id, response)

        if not response.success:
            raise RemoteCallFailed(response.error or "unknown error", status_code=response.status_code)

        intent = self.parse_intent(response.content)

        processing_time = (time.time() - start_time) * 1000
        self.monitor.track_intent(
            request_id=request_id,
            command=command,
            action=intent.action,
            device=intent.device,
            processing_time_ms=processing_time,
        )
        return intent

    @staticmethod
    def parse_intent(text: str) -> Intent:
        """
        Parse completion text into an Intent.

        Raises:
            MalformedIntent: If the text is not a JSON object with string
                "action" and "device" fields
        """
        raw = (text or "").strip()
        if not raw:
            raise MalformedIntent("empty response", raw)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedIntent(f"invalid JSON: {e.msg}", raw) from e

        if not isinstance(data, dict):
            raise MalformedIntent("expected a JSON object", raw)

        try:
            return Intent.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise MalformedIntent(f"invalid fields: {fields}", raw) from e


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
intent_resolver = IntentResolver()
