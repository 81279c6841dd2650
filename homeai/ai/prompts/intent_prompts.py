"""
Intent Prompts - template for turning a command into {action, device}.

The prompt embeds the current device inventory so the model can map
loose phrasing ("the lights in the living room") onto a real device
name, and asks for a bare JSON object so the reply can be parsed
without cleanup.

Prompt Engineering Techniques:
=============================
1. Inventory grounding (device list serialized as JSON)
2. Schema enforcement (exactly two string fields)
3. Output-only instruction (no prose around the JSON)
"""

import json
from typing import Any, List

# ---------------------------------------------------------------------------
# INTENT EXTRACTION PROMPT
# ---------------------------------------------------------------------------
# Placeholders: {devices} (JSON), {command} (raw user text)

INTENT_EXTRACTION_PROMPT = """
You are an AI assistant for a smart home system. The user has the following devices:

{devices}

Your task is to interpret user commands given in everyday language and output a JSON object with two properties: "action" and "device".

Instructions:

- "action": The intended action, such as "turn on", "turn off", "set temperature to", etc.
- "device": The name of the device or appliance the user wants to control.
- Use the device information provided to understand what the user is referring to.
- Both values must be strings.

Please interpret the following command and output only the JSON object without any additional text:

"{command}"
"""

# Stop at the first blank line so trailing chatter never reaches the parser
INTENT_STOP_SEQUENCES = ["\n\n"]


def build_intent_prompt(command: str, devices: List[Any]) -> str:
    """Render the extraction prompt for a command and inventory payload."""
    return INTENT_EXTRACTION_PROMPT.format(
        devices=json.dumps(devices, indent=2),
        command=command,
    )
