"""
Inventory Schemas - Pydantic models for the device read model.

The accessory host describes each device as a name plus an ordered list
of services, each service holding an ordered list of characteristics:

    {
        "name": "Living Room Light",
        "services": [
            {
                "serviceName": "Living Room Light",
                "serviceType": "lightbulb",
                "characteristics": [
                    {"characteristicName": "On", "characteristicType": "on", "value": false}
                ]
            }
        ]
    }

Both the host's camelCase keys and snake_case field names are accepted.
Unrecognised service/characteristic kinds are kept as UNKNOWN rather than
rejected, so a single exotic accessory never blocks an inventory refresh.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


UNKNOWN_SERVICE_NAME = "Unknown Service"
UNKNOWN_CHARACTERISTIC_NAME = "Unknown Characteristic"


class ServiceType(str, Enum):
    """
    Capability kinds a service can expose.

    Only some kinds have a controllable characteristic mapped in the
    action registry; the rest are listed so the inventory can describe
    them to the completion service.
    """
    LIGHTBULB = "lightbulb"
    SWITCH = "switch"
    THERMOSTAT = "thermostat"
    FAN = "fan"
    OUTLET = "outlet"
    GARAGE_DOOR_OPENER = "garage_door_opener"
    LOCK_MECHANISM = "lock_mechanism"
    WINDOW_COVERING = "window_covering"
    TEMPERATURE_SENSOR = "temperature_sensor"
    UNKNOWN = "unknown"


class CharacteristicType(str, Enum):
    """Kinds of attributes a characteristic can hold."""
    ON = "on"                                  # bool
    TARGET_TEMPERATURE = "target_temperature"  # int
    CURRENT_TEMPERATURE = "current_temperature"
    BRIGHTNESS = "brightness"
    ROTATION_SPEED = "rotation_speed"
    NAME = "name"
    UNKNOWN = "unknown"


def _coerce_kind(enum_cls, value: Any):
    """Map a feed value onto an enum member, falling back to UNKNOWN."""
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return enum_cls.UNKNOWN
    normalized = str(value).strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return enum_cls(normalized)
    except ValueError:
        return enum_cls.UNKNOWN


class CharacteristicInfo(BaseModel):
    """A single controllable or readable attribute of a service."""

    model_config = ConfigDict(populate_by_name=True)

    characteristic_name: str = Field(
        default=UNKNOWN_CHARACTERISTIC_NAME,
        alias="characteristicName",
    )
    characteristic_type: CharacteristicType = Field(
        default=CharacteristicType.UNKNOWN,
        alias="characteristicType",
    )
    value: Any = None
    min_value: Optional[int] = Field(default=None, alias="minValue")
    max_value: Optional[int] = Field(default=None, alias="maxValue")

    @field_validator("characteristic_name", mode="before")
    @classmethod
    def _default_name(cls, v):
        return v or UNKNOWN_CHARACTERISTIC_NAME

    @field_validator("characteristic_type", mode="before")
    @classmethod
    def _coerce_type(cls, v):
        return _coerce_kind(CharacteristicType, v)


class ServiceInfo(BaseModel):
    """A named grouping of characteristics (one capability of a device)."""

    model_config = ConfigDict(populate_by_name=True)

    service_name: str = Field(default=UNKNOWN_SERVICE_NAME, alias="serviceName")
    service_type: ServiceType = Field(default=ServiceType.UNKNOWN, alias="serviceType")
    characteristics: List[CharacteristicInfo] = Field(default_factory=list)

    @field_validator("service_name", mode="before")
    @classmethod
    def _default_name(cls, v):
        return v or UNKNOWN_SERVICE_NAME

    @field_validator("service_type", mode="before")
    @classmethod
    def _coerce_type(cls, v):
        return _coerce_kind(ServiceType, v)

    def get_characteristic(self, characteristic_type: CharacteristicType) -> Optional[CharacteristicInfo]:
        """Return the first characteristic of the given kind, if any."""
        return next(
            (c for c in self.characteristics if c.characteristic_type == characteristic_type),
            None,
        )


class DeviceInfo(BaseModel):
    """One inventory entry: a device and the services it exposes."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    services: List[ServiceInfo] = Field(default_factory=list)

    def to_prompt_dict(self) -> dict:
        """Describe the device for the completion prompt (no live values)."""
        return {
            "name": self.name,
            "services": [
                {
                    "serviceName": service.service_name,
                    "serviceType": service.service_type.value,
                    "characteristics": [
                        {
                            "characteristicName": c.characteristic_name,
                            "characteristicType": c.characteristic_type.value,
                        }
                        for c in service.characteristics
                    ],
                }
                for service in self.services
            ],
        }
