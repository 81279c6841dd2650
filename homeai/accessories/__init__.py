"""
Accessories Module - where characteristic writes go.
"""

from homeai.accessories.base import AccessoryHost, InMemoryAccessoryHost, accessory_host

__all__ = [
    "AccessoryHost",
    "InMemoryAccessoryHost",
    "accessory_host",
]
