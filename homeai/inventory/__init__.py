"""
Inventory Module - what devices exist and what they can do.

The accessory host pushes device descriptors in; the intent resolver
reads them to build its prompt and the dispatcher reads them to find
the characteristic to write.
"""

from homeai.inventory.models import (
    CharacteristicInfo,
    CharacteristicType,
    DeviceInfo,
    ServiceInfo,
    ServiceType,
)
from homeai.inventory.store import DeviceInventory, device_inventory, load_inventory_file

__all__ = [
    "CharacteristicInfo",
    "CharacteristicType",
    "DeviceInfo",
    "ServiceInfo",
    "ServiceType",
    "DeviceInventory",
    "device_inventory",
    "load_inventory_file",
]
