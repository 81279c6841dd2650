"""
Intent Module - Natural language to structured intent.

Example Flow:
============
User says: "turn on the living room lights"

IntentResolver extracts:
{
    "action": "turn on",
    "device": "Living Room Light"
}

ActionDispatcher (homeai.services.dispatcher) then resolves the device
against the inventory and applies the value.
"""

from homeai.ai.intent.schemas import Intent
from homeai.ai.intent.parser import IntentResolver, intent_resolver

__all__ = [
    "Intent",
    "IntentResolver",
    "intent_resolver",
]
