"""
Command errors - typed failures of the command pipeline.

Every stage of command handling (intent resolution, device lookup,
characteristic selection, value derivation) fails with one of these.
They are caught at the command boundary (CommandService) and turned
into a per-command result; nothing here is retried.

Hierarchy:
==========
CommandError
├── EmptyCommand
├── RemoteCallFailed
├── MalformedIntent
├── DeviceNotFound
├── ServiceNotFound
├── CharacteristicNotFound
└── ValueUndetermined
    └── ValueOutOfRange
"""

from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# BASE EXCEPTION
# ---------------------------------------------------------------------------

class CommandError(Exception):
    """Base exception for all command pipeline failures."""

    kind: str = "command_error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "kind": self.kind,
            "message": self.message,
            **self.details,
        }


# ---------------------------------------------------------------------------
# INTENT RESOLUTION ERRORS
# ---------------------------------------------------------------------------

class EmptyCommand(CommandError):
    """Raised when the command text is empty or whitespace only."""

    kind = "empty_command"

    def __init__(self):
        super().__init__("Command text is empty")


class RemoteCallFailed(CommandError):
    """Raised when the completion service could not be reached or refused the call."""

    kind = "remote_call_failed"

    def __init__(self, error: str, status_code: Optional[int] = None):
        message = f"Completion service call failed: {error}"
        if status_code is not None:
            message = f"Completion service call failed with status {status_code}: {error}"
        super().__init__(message, status_code=status_code)
        self.status_code = status_code


class MalformedIntent(CommandError):
    """Raised when the completion text is not a valid {action, device} object."""

    kind = "malformed_intent"

    def __init__(self, reason: str, raw: str = ""):
        super().__init__(f"Failed to parse AI response ({reason}): {raw}", raw=raw)
        self.raw = raw


# ---------------------------------------------------------------------------
# DISPATCH ERRORS
# ---------------------------------------------------------------------------

class DeviceNotFound(CommandError):
    """Raised when no inventory entry matches the intent's device name."""

    kind = "device_not_found"

    def __init__(self, device: str):
        super().__init__(f"Accessory not found: {device}", device=device)
        self.device = device


class ServiceNotFound(CommandError):
    """Raised when the matched device exposes no usable service."""

    kind = "service_not_found"

    def __init__(self, device: str):
        super().__init__(f"Service not found on accessory: {device}", device=device)
        self.device = device


class CharacteristicNotFound(CommandError):
    """Raised when the selected service has no controllable characteristic."""

    kind = "characteristic_not_found"

    def __init__(self, device: str, service: str):
        super().__init__(
            f"Characteristic not found for service: {service}",
            device=device,
            service=service,
        )
        self.device = device
        self.service = service


class ValueUndetermined(CommandError):
    """Raised when the action text matches no value rule for the characteristic."""

    kind = "value_undetermined"

    def __init__(self, device: str, action: str, characteristic: str = ""):
        super().__init__(
            f"Could not determine value for action: {action}",
            device=device,
            action=action,
            characteristic=characteristic,
        )
        self.device = device
        self.action = action
        self.characteristic = characteristic


class ValueOutOfRange(ValueUndetermined):
    """Raised when a derived value falls outside the characteristic's plausible range."""

    kind = "value_out_of_range"

    def __init__(self, device: str, action: str, value: Any, minimum: Any, maximum: Any):
        super().__init__(device, action)
        self.message = f"Value {value} for action '{action}' is outside {minimum}..{maximum}"
        self.args = (self.message,)
        self.details.update({"value": value, "min": minimum, "max": maximum})
        self.value = value
