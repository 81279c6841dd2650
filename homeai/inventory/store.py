"""
Device Inventory - the read model of known devices.

The inventory is a snapshot: a tuple of DeviceInfo entries that is only
ever replaced as a whole. Readers grab the current tuple reference and
work on it; update() swaps the reference in one assignment, so a reader
sees either the old inventory or the new one, never a mix. No lock is
needed on the read path.

Lookups are case-insensitive exact matches on the device name. Names
are expected to be unique under that comparison; when the feed breaks
that rule the first entry in snapshot order wins and update() logs a
warning.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from homeai.inventory.models import DeviceInfo

logger = logging.getLogger("homeai.inventory")


class DeviceInventory:
    """
    Atomically swappable device inventory.

    Usage:
        inventory = DeviceInventory()
        inventory.update(load_inventory_file("devices.json"))

        device = inventory.find_by_name("living room light")
        if device is None:
            ...
    """

    def __init__(self, entries: Iterable[DeviceInfo] = ()):
        self._snapshot: Tuple[DeviceInfo, ...] = tuple(entries)

    def snapshot(self) -> Tuple[DeviceInfo, ...]:
        """Return the current inventory. Pure read."""
        return self._snapshot

    def update(self, entries: Iterable[DeviceInfo]) -> None:
        """Replace the whole inventory with a new snapshot."""
        new_snapshot = tuple(entries)

        duplicates = _duplicate_names(new_snapshot)
        if duplicates:
            logger.warning(
                f"Inventory has duplicate device names {sorted(duplicates)}; "
                f"lookups will resolve to the first entry"
            )

        self._snapshot = new_snapshot
        logger.info(f"Inventory updated: {len(new_snapshot)} devices")

    def find_by_name(self, name: str) -> Optional[DeviceInfo]:
        """
        Find a device by name, ignoring case.

        Returns:
            The first matching DeviceInfo in snapshot order, or None
        """
        if not name:
            return None

        wanted = name.casefold()
        for device in self._snapshot:
            if device.name.casefold() == wanted:
                return device
        return None

    def to_prompt_payload(self) -> List[dict]:
        """Serializable view of the snapshot for prompt construction."""
        return [device.to_prompt_dict() for device in self._snapshot]

    def __len__(self) -> int:
        return len(self._snapshot)


def _duplicate_names(entries: Tuple[DeviceInfo, ...]) -> set:
    seen = set()
    duplicates = set()
    for device in entries:
        key = device.name.casefold()
        if key in seen:
            duplicates.add(device.name)
        seen.add(key)
    return duplicates


def load_inventory_file(path: Union[str, Path]) -> List[DeviceInfo]:
    """
    Load a device feed from a JSON file.

    The file holds a list of device objects, or an object with a
    "devices" list.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Inventory file {path} is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("devices", [])
    if not isinstance(data, list):
        raise ValueError(f"Inventory file {path} must contain a list of devices")

    devices = [DeviceInfo.model_validate(item) for item in data]
    logger.info(f"Loaded {len(devices)} devices from {path}")
    return devices


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
device_inventory = DeviceInventory()
