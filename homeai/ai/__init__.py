"""
AI Module - command interpretation for the smart-home bridge.

Module Structure:
================
- providers/: completion clients (OpenAI)
- prompts/: prompt templates
- intent/: command -> {action, device}
- actions/: service-kind table and value rules
- monitoring/: logging and counters

Flow:
=====
1. User: "turn on the living room lights"
2. IntentResolver (OpenAI): {"action": "turn on", "device": "Living Room Light"}
3. ActionDispatcher: Living Room Light / Lightbulb / On -> True
"""

__version__ = "0.1.0"
