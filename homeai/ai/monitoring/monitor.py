"""
Command Monitor - structured logging and counters for the pipeline.

One object tracks every stage of a command:
- Completion request/response (provider, model, tokens, latency)
- Parsed intent
- Dispatch outcome (device, characteristic, value)
- Typed pipeline errors

Each track_* call writes a JSON log line and, where relevant, updates
in-memory aggregates exposed by GET /command/stats.

Usage:
    from homeai.ai.monitoring import command_monitor

    command_monitor.track_request(request_id, prompt, "openai", "gpt-4o-mini")
    command_monitor.track_response_from_ai_response(request_id, response)

    stats = command_monitor.get_stats()
"""

import json
import logging
import sys
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, Optional

from homeai.core.config import settings
from homeai.ai.providers.base import AIResponse


# ---------------------------------------------------------------------------
# LOGGING SETUP
# ---------------------------------------------------------------------------
# The handler sits on the package root so every homeai.* logger shares it
root_logger = logging.getLogger("homeai")
root_logger.setLevel(settings.LOG_LEVEL.upper())

if not root_logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

logger = logging.getLogger("homeai.ai")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _preview(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


# ---------------------------------------------------------------------------
# METRICS DATA CLASSES
# ---------------------------------------------------------------------------
@dataclass
class AggregatedMetrics:
    """Aggregated counters since process start (or last reset)."""
    completion_requests: int = 0
    completion_failures: int = 0
    total_tokens: int = 0
    total_latency_ms: float = 0.0
    intents_parsed: int = 0
    dispatches_succeeded: int = 0
    dispatches_failed: int = 0
    errors_by_kind: Dict[str, int] = field(default_factory=dict)

    @property
    def avg_latency_ms(self) -> float:
        if self.completion_requests == 0:
            return 0.0
        return self.total_latency_ms / self.completion_requests

    @property
    def success_rate(self) -> float:
        total = self.dispatches_succeeded + self.dispatches_failed
        if total == 0:
            return 0.0
        return (self.dispatches_succeeded / total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completion_requests": self.completion_requests,
            "completion_failures": self.completion_failures,
            "total_tokens": self.total_tokens,
            "avg_latency_ms": round(self.avg_latency_ms, 2),
            "intents_parsed": self.intents_parsed,
            "dispatches_succeeded": self.dispatches_succeeded,
            "dispatches_failed": self.dispatches_failed,
            "success_rate": f"{self.success_rate:.1f}%",
            "errors_by_kind": dict(self.errors_by_kind),
        }


# ---------------------------------------------------------------------------
# COMMAND MONITOR
# ---------------------------------------------------------------------------
class CommandMonitor:
    """Logging + counters for the command pipeline."""

    def __init__(self):
        self._logger = logger
        self._lock = Lock()
        self._aggregated = AggregatedMetrics()

    def track_request(
        self,
        request_id: str,
        prompt: str,
        provider: str,
        model: str,
    ) -> None:
        """Track a completion request about to be sent."""
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "provider": provider,
            "model": model,
            "prompt_length": len(prompt),
            "timestamp": _now(),
        }
        self._logger.info(f"AI Request: {json.dumps(log_data)}")

    def track_response_from_ai_response(self, request_id: str, response: AIResponse) -> None:
        """Track a completion response (logs + counters)."""
        with self._lock:
            self._aggregated.completion_requests += 1
            if not response.success:
                self._aggregated.completion_failures += 1
            self._aggregated.total_tokens += response.usage.total_tokens
            self._aggregated.total_latency_ms += response.latency_ms

        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            **response.to_dict(),
        }
        level = logging.INFO if response.success else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")

    def track_intent(
        self,
        request_id: str,
        command: str,
        action: str,
        device: str,
        processing_time_ms: float = 0.0,
    ) -> None:
        """Track a parsed intent."""
        with self._lock:
            self._aggregated.intents_parsed += 1

        log_data = {
            "event": "intent_parsed",
            "request_id": request_id,
            "action": action,
            "device": device,
            "processing_time_ms": round(processing_time_ms, 2),
            "command": _preview(command, 50),
            "timestamp": _now(),
        }
        self._logger.info(f"Intent Parsed: {json.dumps(log_data)}")

    def track_dispatch(
        self,
        request_id: str,
        device: str,
        characteristic: str,
        value: Any,
        observed_value: Any,
    ) -> None:
        """Track a characteristic write that went through."""
        with self._lock:
            self._aggregated.dispatches_succeeded += 1

        log_data = {
            "event": "dispatch",
            "request_id": request_id,
            "device": device,
            "characteristic": characteristic,
            "value": value,
            "observed_value": observed_value,
            "timestamp": _now(),
        }
        self._logger.info(f"Dispatch: {json.dumps(log_data, default=str)}")

    def track_error(
        self,
        request_id: str,
        kind: str,
        message: str,
        stage: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Track a typed pipeline failure."""
        with self._lock:
            self._aggregated.errors_by_kind[kind] = self._aggregated.errors_by_kind.get(kind, 0) + 1
            if stage == "dispatch":
                self._aggregated.dispatches_failed += 1

        log_data = {
            "event": "command_error",
            "request_id": request_id,
            "kind": kind,
            "stage": stage,
            "error": message,
            "timestamp": _now(),
        }
        if details:
            log_data["details"] = details
        self._logger.error(f"Command Error: {json.dumps(log_data, default=str)}")

    def get_stats(self) -> AggregatedMetrics:
        """Get a copy of the aggregated statistics."""
        with self._lock:
            return replace(self._aggregated, errors_by_kind=dict(self._aggregated.errors_by_kind))

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._aggregated = AggregatedMetrics()


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
command_monitor = CommandMonitor()
