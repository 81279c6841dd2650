"""
Monitoring Module - observability for the command pipeline.

    from homeai.ai.monitoring import command_monitor

    command_monitor.track_intent(request_id, command, action, device)
    stats = command_monitor.get_stats()
"""

from homeai.ai.monitoring.monitor import AggregatedMetrics, CommandMonitor, command_monitor

__all__ = [
    "AggregatedMetrics",
    "CommandMonitor",
    "command_monitor",
]
