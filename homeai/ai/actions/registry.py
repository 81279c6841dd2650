"""
Action Registry - which characteristic a service controls, and how an
action phrase becomes a concrete value for it.

Two closed tables live here:

1. Service kind -> target characteristic kind
   lightbulb, switch, fan, outlet -> on
   thermostat                     -> target_temperature

2. Characteristic kind -> value rule
   on                 -> "turn on"/"switch on" => True,
                         "turn off"/"switch off" => False
   target_temperature -> "set ... temperature ... to <int>" => int

Anything not in a table is not guessed at. Supporting a new kind means
one register_service() entry plus one register_rule() call.

Usage:
======
```python
from homeai.ai.actions.registry import action_registry

kind = action_registry.characteristic_for(ServiceType.LIGHTBULB)
value = action_registry.derive_value(kind, "please turn on the lamp")  # True
```
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from homeai.inventory.models import CharacteristicType, ServiceType


logger = logging.getLogger("homeai.ai.actions.registry")


# ---------------------------------------------------------------------------
# VALUE RULES
# ---------------------------------------------------------------------------

@dataclass
class ValueRule:
    """
    How to read a value for one characteristic kind out of an action phrase.

    Attributes:
        characteristic_type: Kind this rule applies to
        description: Human-readable description
        derive: Callable(action_text) -> value, or None when nothing matches
        examples: Example phrases that match
    """
    characteristic_type: CharacteristicType
    description: str
    derive: Callable[[str], Optional[Any]]
    examples: List[str] = field(default_factory=list)


POWER_ON_PHRASES = ("turn on", "switch on")
POWER_OFF_PHRASES = ("turn off", "switch off")

TEMPERATURE_PATTERN = re.compile(r"set.*temperature.*to (\d+)", re.IGNORECASE)


def derive_power_state(action: str) -> Optional[bool]:
    """Case-insensitive substring match on on/off phrases."""
    action_lower = action.lower()

    if any(phrase in action_lower for phrase in POWER_ON_PHRASES):
        return True
    if any(phrase in action_lower for phrase in POWER_OFF_PHRASES):
        return False
    return None


def derive_target_temperature(action: str) -> Optional[int]:
    """Extract the integer from "set ... temperature ... to N"."""
    match = TEMPERATURE_PATTERN.search(action)
    if match:
        return int(match.group(1))
    return None


# ---------------------------------------------------------------------------
# ACTION REGISTRY
# ---------------------------------------------------------------------------

class ActionRegistry:
    """
    Registry of controllable service kinds and value rules.

    This is a singleton that maintains the master tables; tests may build
    their own instance.
    """

    def __init__(self):
        """Initialize the registry with built-in kinds and rules."""
        self._service_targets: Dict[ServiceType, CharacteristicType] = {}
        self._rules: Dict[CharacteristicType, ValueRule] = {}
        self._register_builtins()
        logger.info(
            f"Action registry initialized with {len(self._service_targets)} service kinds, "
            f"{len(self._rules)} value rules"
        )

    def _register_builtins(self):
        """Register the built-in tables."""

        # -----------------------------------------------------------------------
        # POWER
        # -----------------------------------------------------------------------
        for service_type in (
            ServiceType.LIGHTBULB,
            ServiceType.SWITCH,
            ServiceType.FAN,
            ServiceType.OUTLET,
        ):
            self.register_service(service_type, CharacteristicType.ON)

        self.register_rule(ValueRule(
            characteristic_type=CharacteristicType.ON,
            description="Power state from on/off phrases",
            derive=derive_power_state,
            examples=["turn on", "switch off the fan"],
        ))

        # -----------------------------------------------------------------------
        # TEMPERATURE
        # -----------------------------------------------------------------------
        self.register_service(ServiceType.THERMOSTAT, CharacteristicType.TARGET_TEMPERATURE)

        self.register_rule(ValueRule(
            characteristic_type=CharacteristicType.TARGET_TEMPERATURE,
            description="Integer set-point from 'set temperature to N'",
            derive=derive_target_temperature,
            examples=["set temperature to 72", "please set the thermostat temperature to 21 degrees"],
        ))

    # -----------------------------------------------------------------------
    # REGISTRATION
    # -----------------------------------------------------------------------

    def register_service(self, service_type: ServiceType, characteristic_type: CharacteristicType) -> None:
        """Map a service kind to the characteristic kind it controls."""
        self._service_targets[service_type] = characteristic_type

    def register_rule(self, rule: ValueRule) -> None:
        """Register (or replace) the value rule for a characteristic kind."""
        self._rules[rule.characteristic_type] = rule

    # -----------------------------------------------------------------------
    # LOOKUPS
    # -----------------------------------------------------------------------

    def characteristic_for(self, service_type: ServiceType) -> Optional[CharacteristicType]:
        """Characteristic kind a service kind controls, or None."""
        return self._service_targets.get(service_type)

    def is_controllable(self, service_type: ServiceType) -> bool:
        return service_type in self._service_targets

    def get_rule(self, characteristic_type: CharacteristicType) -> Optional[ValueRule]:
        return self._rules.get(characteristic_type)

    def derive_value(self, characteristic_type: CharacteristicType, action: str) -> Optional[Any]:
        """
        Derive a concrete value from action text.

        Returns:
            The value, or None when no rule exists or the phrase does not match
        """
        rule = self._rules.get(characteristic_type)
        if rule is None:
            return None
        return rule.derive(action or "")

    def list_service_kinds(self) -> List[ServiceType]:
        return list(self._service_targets)


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
action_registry = ActionRegistry()
