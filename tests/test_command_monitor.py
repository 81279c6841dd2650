"""
Tests for CommandMonitor counters.

Tests for:
- Completion, intent and dispatch counters
- Error counts by kind and stage
- get_stats() returning a copy
"""

from homeai.ai.monitoring import CommandMonitor
from homeai.ai.providers.base import AIResponse, ProviderType, TokenUsage


def _create_mock_response(success: bool = True, **kwargs) -> AIResponse:
    return AIResponse(
        content="{}",
        provider=ProviderType.OPENAI,
        model="gpt-4o-mini",
        success=success,
        **kwargs,
    )


class TestCounters:
    """Tests for the aggregated counters."""

    def test_completion_counters(self):
        monitor = CommandMonitor()

        monitor.track_response_from_ai_response(
            "r1", _create_mock_response(usage=TokenUsage(prompt_tokens=90, completion_tokens=10), latency_ms=40.0)
        )
        monitor.track_response_from_ai_response(
            "r2", _create_mock_response(success=False, error="boom", latency_ms=20.0)
        )

        stats = monitor.get_stats()
        assert stats.completion_requests == 2
        assert stats.completion_failures == 1
        assert stats.total_tokens == 100
        assert stats.avg_latency_ms == 30.0

    def test_errors_by_stage(self):
        monitor = CommandMonitor()

        monitor.track_error("r1", "empty_command", "Command text is empty", stage="intent")
        monitor.track_error("r2", "device_not_found", "Accessory not found: X", stage="dispatch")
        monitor.track_dispatch("r3", "Lamp", "on", True, True)

        stats = monitor.get_stats()
        assert stats.errors_by_kind == {"empty_command": 1, "device_not_found": 1}
        assert stats.dispatches_failed == 1
        assert stats.dispatches_succeeded == 1
        assert stats.to_dict()["success_rate"] == "50.0%"

    def test_reset(self):
        monitor = CommandMonitor()
        monitor.track_error("r1", "empty_command", "Command text is empty", stage="intent")

        monitor.reset()

        assert monitor.get_stats().errors_by_kind == {}


class TestStatsSnapshot:
    """get_stats() hands out a copy, not the live counters."""

    def test_later_tracking_does_not_change_snapshot(self):
        monitor = CommandMonitor()
        monitor.track_dispatch("r1", "Lamp", "on", True, True)
        monitor.track_error("r2", "value_undetermined", "Could not determine value", stage="dispatch")

        stats = monitor.get_stats()
        monitor.track_dispatch("r3", "Lamp", "on", False, False)
        monitor.track_error("r4", "value_undetermined", "Could not determine value", stage="dispatch")

        assert stats.dispatches_succeeded == 1
        assert stats.dispatches_failed == 1
        assert stats.errors_by_kind == {"value_undetermined": 1}
        assert monitor.get_stats().errors_by_kind == {"value_undetermined": 2}

    def test_mutating_snapshot_does_not_change_monitor(self):
        monitor = CommandMonitor()

        stats = monitor.get_stats()
        stats.dispatches_succeeded = 99
        stats.errors_by_kind["bogus"] = 1

        fresh = monitor.get_stats()
        assert fresh.dispatches_succeeded == 0
        assert fresh.errors_by_kind == {}
