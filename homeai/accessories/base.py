"""
Accessory Host - outbound "set characteristic" side effect.

The host owns the real accessories and is the source of truth for their
state. The dispatcher asks it to write a value and reports whatever the
host says the characteristic now holds.

Design Pattern: Strategy Pattern
================================
AccessoryHost is the interface; InMemoryAccessoryHost writes straight
onto the inventory's characteristic records, which is what the bridge
uses when it runs standalone and in tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from homeai.inventory.models import CharacteristicInfo, DeviceInfo, ServiceInfo

logger = logging.getLogger("homeai.accessories")


class AccessoryHost(ABC):
    """Interface to whatever owns the physical accessories."""

    @abstractmethod
    async def set_characteristic(
        self,
        device: DeviceInfo,
        service: ServiceInfo,
        characteristic: CharacteristicInfo,
        value: Any,
    ) -> Any:
        """
        Write a value to a characteristic.

        Returns:
            The value the host observes after the write
        """
        pass


class InMemoryAccessoryHost(AccessoryHost):
    """Host that stores values on the inventory records themselves."""

    async def set_characteristic(
        self,
        device: DeviceInfo,
        service: ServiceInfo,
        characteristic: CharacteristicInfo,
        value: Any,
    ) -> Any:
        characteristic.value = value
        logger.debug(
            f"{device.name}/{service.service_name}/{characteristic.characteristic_name} = {value!r}"
        )
        return characteristic.value


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
accessory_host = InMemoryAccessoryHost()
