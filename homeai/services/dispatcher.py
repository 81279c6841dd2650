"""
Action Dispatcher - applies an Intent to a device characteristic.

Algorithm:
==========
1. Find the device by name in the inventory (at dispatch time, never a
   copy captured while building the prompt)          -> DeviceNotFound
2. Pick the service: unless STRICT_SERVICE_MATCH, the first one able
   to take the action (the one named like the device preferred); in
   strict mode only the one named like the device    -> ServiceNotFound
3. Map the service kind to its characteristic kind and find that
   characteristic on the service                      -> CharacteristicNotFound
4. Derive a typed value from the action phrase        -> ValueUndetermined
5. Write it through the accessory host and report the observed value

Every failure is terminal for the command: nothing is written and
nothing is retried.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from homeai.core.config import settings
from homeai.core.errors import (
    CharacteristicNotFound,
    DeviceNotFound,
    ServiceNotFound,
    ValueOutOfRange,
    ValueUndetermined,
)
from homeai.ai.actions import ActionRegistry, action_registry
from homeai.ai.intent.schemas import Intent
from homeai.ai.monitoring import CommandMonitor, command_monitor
from homeai.accessories import AccessoryHost, accessory_host
from homeai.inventory import (
    CharacteristicInfo,
    CharacteristicType,
    DeviceInfo,
    DeviceInventory,
    ServiceInfo,
    device_inventory,
)

logger = logging.getLogger("homeai.services.dispatcher")


@dataclass
class DispatchResult:
    """Outcome of a successful dispatch."""
    device: str
    service: str
    characteristic: CharacteristicType
    value: Any
    observed_value: Any

    def to_dict(self) -> Dict[str, Any]:
        return {
            "device": self.device,
            "service": self.service,
            "characteristic": self.characteristic.value,
            "value": self.value,
            "observed_value": self.observed_value,
        }


class ActionDispatcher:
    """
    Resolves an Intent against the inventory and applies it.

    Usage:
        dispatcher = ActionDispatcher()
        result = await dispatcher.dispatch(Intent(action="turn on", device="Lamp"))
        print(result.observed_value)  # True
    """

    def __init__(
        self,
        inventory: Optional[DeviceInventory] = None,
        registry: Optional[ActionRegistry] = None,
        host: Optional[AccessoryHost] = None,
        monitor: Optional[CommandMonitor] = None,
        strict_service_match: Optional[bool] = None,
        temperature_range: Optional[Tuple[int, int]] = None,
    ):
        self.inventory = inventory if inventory is not None else device_inventory
        self.registry = registry or action_registry
        self.host = host or accessory_host
        self.monitor = monitor or command_monitor
        self.strict_service_match = (
            settings.STRICT_SERVICE_MATCH if strict_service_match is None else strict_service_match
        )
        self.temperature_range = temperature_range or (
            settings.TARGET_TEMPERATURE_MIN,
            settings.TARGET_TEMPERATURE_MAX,
        )

    async def dispatch(self, intent: Intent, request_id: str = "") -> DispatchResult:
        """
        Apply an intent to the matching device.

        Raises:
            DeviceNotFound, ServiceNotFound, CharacteristicNotFound,
            ValueUndetermined (ValueOutOfRange included)
        """
        device = self.inventory.find_by_name(intent.device)
        if device is None:
            raise DeviceNotFound(intent.device)

        logger.info(f"[{request_id}] Executing '{intent.action}' on '{device.name}'")

        service = self._select_service(device)

        characteristic_type = self.registry.characteristic_for(service.service_type)
        characteristic = (
            service.get_characteristic(characteristic_type) if characteristic_type else None
        )
        if characteristic is None:
            raise CharacteristicNotFound(device.name, service.service_name)

        value = self.registry.derive_value(characteristic.characteristic_type, intent.action)
        if value is None:
            raise ValueUndetermined(
                device.name,
                intent.action,
                characteristic.characteristic_type.value,
            )
        self._check_range(device, characteristic, intent.action, value)

        observed = await self.host.set_characteristic(device, service, characteristic, value)
        logger.info(f"[{request_id}] The {device.name} is now set to {observed}")

        self.monitor.track_dispatch(
            request_id=request_id,
            device=device.name,
            characteristic=characteristic.characteristic_type.value,
            value=value,
            observed_value=observed,
        )

        return DispatchResult(
            device=device.name,
            service=service.service_name,
            characteristic=characteristic.characteristic_type,
            value=value,
            observed_value=observed,
        )

    def _select_service(self, device: DeviceInfo) -> ServiceInfo:
        """
        Pick the service to act on.

        In strict mode only the service named like the device is accepted.
        Otherwise a usable service (controllable kind that exposes its
        mapped characteristic) is preferred, the one named like the device
        first. With no usable service, the named service, then the first
        controllable one, is returned so the caller reports what is missing.
        """
        wanted = device.name.casefold()
        named = next(
            (s for s in device.services if s.service_name.casefold() == wanted),
            None,
        )

        if self.strict_service_match:
            if named is None:
                raise ServiceNotFound(device.name)
            return named

        if named is not None and self._is_usable(named):
            return named

        for service in device.services:
            if self._is_usable(service):
                return service

        if named is not None:
            return named

        for service in device.services:
            if self.registry.is_controllable(service.service_type):
                return service

        raise ServiceNotFound(device.name)

    def _is_usable(self, service: ServiceInfo) -> bool:
        characteristic_type = self.registry.characteristic_for(service.service_type)
        if characteristic_type is None:
            return False
        return service.get_characteristic(characteristic_type) is not None

    def _check_range(
        self,
        device: DeviceInfo,
        characteristic: CharacteristicInfo,
        action: str,
        value: Any,
    ) -> None:
        if characteristic.characteristic_type != CharacteristicType.TARGET_TEMPERATURE:
            return

        minimum = characteristic.min_value
        maximum = characteristic.max_value
        if minimum is None:
            minimum = self.temperature_range[0]
        if maximum is None:
            maximum = self.temperature_range[1]

        if not minimum <= value <= maximum:
            raise ValueOutOfRange(device.name, action, value, minimum, maximum)


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
action_dispatcher = ActionDispatcher()
