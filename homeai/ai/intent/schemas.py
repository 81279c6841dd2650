"""
Intent Schemas - the structured result of interpreting a command.

An Intent is exactly what the completion service returned: a free-text
action phrase and a free-text device name. Nothing is normalised or
checked against the inventory here; that is the dispatcher's job.

Intents are transient: one per command, never stored, never merged.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Intent(BaseModel):
    """
    Structured {action, device} intent.

    Example:
        {"action": "turn on", "device": "Living Room Light"}
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    action: StrictStr = Field(description="Desired effect, e.g. 'turn on' or 'set temperature to 72'")
    device: StrictStr = Field(description="Device name as extracted from the command")
