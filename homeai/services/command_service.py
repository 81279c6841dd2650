"""
Command Service - runs one command through resolver and dispatcher.

This is the command-handling boundary: every CommandError raised by
the resolver or the dispatcher stops here and becomes a failed
CommandResult. Nothing is retried. Unexpected exceptions are not
caught; they are bugs, not command outcomes.

    ┌──────────────┐     ┌────────────────┐     ┌──────────────────┐
    │ command text │ ──▶ │ IntentResolver │ ──▶ │ ActionDispatcher │
    └──────────────┘     └────────────────┘     └──────────────────┘
                           (remote call)          (inventory lookup,
                                                   host write)
"""

import logging
import time
import uuid
from typing import Optional

from homeai.core.errors import CommandError
from homeai.ai.intent import IntentResolver, intent_resolver
from homeai.ai.monitoring import CommandMonitor, command_monitor
from homeai.services.command_result import CommandResult
from homeai.services.dispatcher import ActionDispatcher, action_dispatcher

logger = logging.getLogger("homeai.services.command")


class CommandService:
    """
    Orchestrates command processing.

    Usage:
        result = await command_service.process("turn on the living room lights")
        if result.success:
            print(result.message)
        else:
            print(result.error_kind, result.message)
    """

    def __init__(
        self,
        resolver: Optional[IntentResolver] = None,
        dispatcher: Optional[ActionDispatcher] = None,
        monitor: Optional[CommandMonitor] = None,
    ):
        self.resolver = resolver or intent_resolver
        self.dispatcher = dispatcher or action_dispatcher
        self.monitor = monitor or command_monitor

    async def process(self, command: str) -> CommandResult:
        """
        Interpret and apply a command.

        Args:
            command: Natural language command text

        Returns:
            CommandResult; success=False with error_kind on any pipeline failure
        """
        request_id = str(uuid.uuid4())
        start_time = time.time()

        stage = "intent"
        intent = None
        try:
            intent = await self.resolver.resolve(command, request_id=request_id)

            stage = "dispatch"
            dispatch = await self.dispatcher.dispatch(intent, request_id=request_id)

        except CommandError as e:
            self.monitor.track_error(
                request_id=request_id,
                kind=e.kind,
                message=e.message,
                stage=stage,
                details=e.details,
            )
            return CommandResult(
                success=False,
                message=e.message,
                request_id=request_id,
                intent=intent,
                error_kind=e.kind,
                error_details=e.details,
                processing_time_ms=(time.time() - start_time) * 1000,
            )

        return CommandResult(
            success=True,
            message=f"The {dispatch.device} is now set to {dispatch.observed_value}",
            request_id=request_id,
            intent=intent,
            dispatch=dispatch,
            processing_time_ms=(time.time() - start_time) * 1000,
        )


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
command_service = CommandService()
