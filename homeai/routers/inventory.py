"""
Inventory router - read and refresh the device inventory.

The accessory host pushes its device list here whenever it changes.
A PUT replaces the whole inventory in one swap.
"""

from typing import List

from fastapi import APIRouter, Depends

from homeai.deps import get_inventory
from homeai.inventory import DeviceInfo, DeviceInventory

# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("", response_model=List[DeviceInfo])
def list_inventory(inventory: DeviceInventory = Depends(get_inventory)):
    """Return the current inventory snapshot."""
    return list(inventory.snapshot())


@router.put("")
def replace_inventory(
    devices: List[DeviceInfo],
    inventory: DeviceInventory = Depends(get_inventory),
):
    """
    Replace the inventory with a new device list.

    Returns:
        {"devices": <count>}
    """
    inventory.update(devices)
    return {"devices": len(inventory)}
