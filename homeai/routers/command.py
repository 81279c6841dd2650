"""
Command Router - HTTP ingress for natural language commands.

This router is a thin transport wrapper: it hands the raw command text
to CommandService and maps the outcome to a status code.

    POST /command {"command": "turn on the living room lights"}
        200 "Command executed successfully."
        500 "<error message>"
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from homeai.deps import get_command_service, get_monitor
from homeai.ai.monitoring import CommandMonitor
from homeai.services.command_service import CommandService


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger("homeai.routers.command")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/command", tags=["command"])


# ---------------------------------------------------------------------------
# REQUEST/RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class CommandRequest(BaseModel):
    """
    Request schema for POST /command.

    Empty and over-long commands are accepted here and rejected by the
    endpoint or the pipeline, so the caller gets the same plain-text 500
    as for any other failure.
    """
    command: str = Field(default="", description="Natural language command")


SUCCESS_MESSAGE = "Command executed successfully."
MAX_COMMAND_LENGTH = 500


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("", response_class=PlainTextResponse)
async def execute_command(
    request: CommandRequest,
    service: CommandService = Depends(get_command_service),
):
    """
    Interpret a natural language command and apply it.

    **Examples:**
    - "Turn on the living room lights"
    - "Set the hallway thermostat temperature to 21"
    """
    logger.info(f"Received command: {request.command[:MAX_COMMAND_LENGTH]}")

    if len(request.command) > MAX_COMMAND_LENGTH:
        message = f"Command text exceeds {MAX_COMMAND_LENGTH} characters"
        logger.error(f"Error executing command: {message}")
        return PlainTextResponse(
            message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    result = await service.process(request.command)

    if not result.success:
        logger.error(f"Error executing command [{result.error_kind}]: {result.message}")
        return PlainTextResponse(
            result.message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info(result.message)
    return PlainTextResponse(SUCCESS_MESSAGE, status_code=status.HTTP_200_OK)


@router.get("/stats")
async def get_command_stats(monitor: CommandMonitor = Depends(get_monitor)):
    """Pipeline counters since startup."""
    return monitor.get_stats().to_dict()
