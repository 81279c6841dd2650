"""
Actions Module - service-kind table and action value rules.
"""

from homeai.ai.actions.registry import (
    ActionRegistry,
    ValueRule,
    action_registry,
    derive_power_state,
    derive_target_temperature,
)

__all__ = [
    "ActionRegistry",
    "ValueRule",
    "action_registry",
    "derive_power_state",
    "derive_target_temperature",
]
