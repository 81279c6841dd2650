"""
Command Result - per-command outcome returned by CommandService.

Extracted to its own module so routers can import it without pulling
in the whole pipeline.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from homeai.ai.intent.schemas import Intent
from homeai.services.dispatcher import DispatchResult


@dataclass
class CommandResult:
    """
    Result of processing one natural language command.

    Attributes:
        success: Whether the command was applied
        message: Human-readable result message
        request_id: Unique request identifier for tracing
        intent: The resolved intent, when resolution got that far
        dispatch: The dispatch outcome on success
        error_kind: CommandError.kind on failure
        error_details: Context for the failure (device, action, status...)
        processing_time_ms: Processing time in milliseconds
    """
    success: bool
    message: str = ""
    request_id: str = ""
    intent: Optional[Intent] = None
    dispatch: Optional[DispatchResult] = None
    error_kind: Optional[str] = None
    error_details: Dict[str, Any] = field(default_factory=dict)
    processing_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for response."""
        return {
            "success": self.success,
            "message": self.message,
            "request_id": self.request_id,
            "intent": self.intent.model_dump() if self.intent else None,
            "dispatch": self.dispatch.to_dict() if self.dispatch else None,
            "error_kind": self.error_kind,
            "error_details": self.error_details,
            "processing_time_ms": self.processing_time_ms,
        }
