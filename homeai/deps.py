"""
Dependencies module - reusable FastAPI dependencies for route handlers.

Routes reach the pipeline singletons through these functions so tests
can swap them with app.dependency_overrides.
"""

from homeai.inventory import DeviceInventory, device_inventory  # Shared device read model
from homeai.ai.monitoring import CommandMonitor, command_monitor  # Pipeline counters
from homeai.services.command_service import CommandService, command_service  # Resolver + dispatcher


def get_command_service() -> CommandService:
    """Return the process-wide command pipeline."""
    return command_service


def get_inventory() -> DeviceInventory:
    """Return the process-wide device inventory."""
    return device_inventory


def get_monitor() -> CommandMonitor:
    """Return the process-wide command monitor."""
    return command_monitor
