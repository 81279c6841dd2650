"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- A sample device inventory (lights, thermostat, odd-shaped devices)
- A mocked completion provider (no network, no tokens)
- Resolver / dispatcher / command service wired to those fakes
- A FastAPI TestClient with the pipeline dependencies overridden
"""

from typing import Generator, List
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from homeai.main import app
from homeai.deps import get_command_service, get_inventory, get_monitor
from homeai.accessories import InMemoryAccessoryHost
from homeai.ai.actions import ActionRegistry
from homeai.ai.intent import IntentResolver
from homeai.ai.monitoring import CommandMonitor
from homeai.ai.providers.base import AIResponse, ProviderType
from homeai.inventory import (
    CharacteristicInfo,
    CharacteristicType,
    DeviceInfo,
    DeviceInventory,
    ServiceInfo,
    ServiceType,
)
from homeai.services.command_service import CommandService
from homeai.services.dispatcher import ActionDispatcher


# ---------------------------------------------------------------------------
# INVENTORY FIXTURES
# ---------------------------------------------------------------------------

def make_devices() -> List[DeviceInfo]:
    """
    Build a fresh device list.

    - Living Room Light: lightbulb service named like the device
    - Hallway Thermostat: thermostat with current + target temperature
    - Living Room: lightbulb service named "Light" (names differ)
    - Garage: garage door opener (no controllable characteristic mapped)
    - Desk Fan: fan service without an On characteristic
    - Porch Sensor: temperature sensor only
    """
    return [
        DeviceInfo(
            name="Living Room Light",
            services=[
                ServiceInfo(
                    service_name="Living Room Light",
                    service_type=ServiceType.LIGHTBULB,
                    characteristics=[
                        CharacteristicInfo(
                            characteristic_name="On",
                            characteristic_type=CharacteristicType.ON,
                            value=False,
                        ),
                        CharacteristicInfo(
                            characteristic_name="Brightness",
                            characteristic_type=CharacteristicType.BRIGHTNESS,
                            value=100,
                        ),
                    ],
                ),
            ],
        ),
        DeviceInfo(
            name="Hallway Thermostat",
            services=[
                ServiceInfo(
                    service_name="Hallway Thermostat",
                    service_type=ServiceType.THERMOSTAT,
                    characteristics=[
                        CharacteristicInfo(
                            characteristic_name="Current Temperature",
                            characteristic_type=CharacteristicType.CURRENT_TEMPERATURE,
                            value=19,
                        ),
                        CharacteristicInfo(
                            characteristic_name="Target Temperature",
                            characteristic_type=CharacteristicType.TARGET_TEMPERATURE,
                            value=20,
                        ),
                    ],
                ),
            ],
        ),
        DeviceInfo(
            name="Living Room",
            services=[
                ServiceInfo(
                    service_name="Accessory Information",
                    service_type=ServiceType.UNKNOWN,
                ),
                ServiceInfo(
                    service_name="Light",
                    service_type=ServiceType.LIGHTBULB,
                    characteristics=[
                        CharacteristicInfo(
                            characteristic_name="On",
                            characteristic_type=CharacteristicType.ON,
                            value=False,
                        ),
                    ],
                ),
            ],
        ),
        DeviceInfo(
            name="Garage",
            services=[
                ServiceInfo(
                    service_name="Garage",
                    service_type=ServiceType.GARAGE_DOOR_OPENER,
                    characteristics=[
                        CharacteristicInfo(characteristic_name="Target Door State", value=1),
                    ],
                ),
            ],
        ),
        DeviceInfo(
            name="Desk Fan",
            services=[
                ServiceInfo(
                    service_name="Desk Fan",
                    service_type=ServiceType.FAN,
                    characteristics=[
                        CharacteristicInfo(
                            characteristic_name="Rotation Speed",
                            characteristic_type=CharacteristicType.ROTATION_SPEED,
                            value=50,
                        ),
                    ],
                ),
            ],
        ),
        DeviceInfo(
            name="Porch Sensor",
            services=[
                ServiceInfo(
                    service_name="Sensor",
                    service_type=ServiceType.TEMPERATURE_SENSOR,
                    characteristics=[
                        CharacteristicInfo(
                            characteristic_name="Current Temperature",
                            characteristic_type=CharacteristicType.CURRENT_TEMPERATURE,
                            value=12,
                        ),
                    ],
                ),
            ],
        ),
    ]


@pytest.fixture
def inventory() -> DeviceInventory:
    """A fresh inventory loaded with make_devices()."""
    return DeviceInventory(make_devices())


@pytest.fixture
def monitor() -> CommandMonitor:
    """An isolated monitor so counters never leak between tests."""
    return CommandMonitor()


# ---------------------------------------------------------------------------
# PROVIDER FIXTURES
# ---------------------------------------------------------------------------

def make_ai_response(content: str = "", success: bool = True, **kwargs) -> AIResponse:
    """Helper to create an AIResponse from the mocked provider."""
    return AIResponse(
        content=content,
        provider=ProviderType.OPENAI,
        model="gpt-4o-mini",
        success=success,
        **kwargs,
    )


@pytest.fixture
def mock_provider() -> MagicMock:
    """
    Completion provider double.

    Set mock_provider.generate.return_value in each test.
    """
    provider = MagicMock()
    provider.provider_type = ProviderType.OPENAI
    provider.model = "gpt-4o-mini"
    provider.generate = AsyncMock(return_value=make_ai_response("{}"))
    return provider


# ---------------------------------------------------------------------------
# PIPELINE FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def resolver(mock_provider, inventory, monitor) -> IntentResolver:
    return IntentResolver(provider=mock_provider, inventory=inventory, monitor=monitor)


@pytest.fixture
def dispatcher(inventory, monitor) -> ActionDispatcher:
    """Dispatcher in the default (fallback) service-selection mode."""
    return ActionDispatcher(
        inventory=inventory,
        registry=ActionRegistry(),
        host=InMemoryAccessoryHost(),
        monitor=monitor,
        strict_service_match=False,
        temperature_range=(0, 100),
    )


@pytest.fixture
def command_service(resolver, dispatcher, monitor) -> CommandService:
    return CommandService(resolver=resolver, dispatcher=dispatcher, monitor=monitor)


# ---------------------------------------------------------------------------
# HTTP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def client(command_service, inventory, monitor) -> Generator[TestClient, None, None]:
    """
    Create a test client wired to the fixture pipeline.

    Overrides the pipeline dependencies so no request touches the
    process-wide singletons or the network.
    """
    app.dependency_overrides[get_command_service] = lambda: command_service
    app.dependency_overrides[get_inventory] = lambda: inventory
    app.dependency_overrides[get_monitor] = lambda: monitor

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
