"""
Main application entry point - FastAPI app instance and configuration.
This is where the ASGI application is created and configured.
Run with: uvicorn homeai.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager

import uvicorn  # ASGI server for the run() entry point
from fastapi import FastAPI  # The FastAPI framework

from homeai.core.config import settings  # Application settings
from homeai.inventory import device_inventory, load_inventory_file  # Device read model
from homeai.routers import command, inventory  # Route handlers (endpoints)

logger = logging.getLogger("homeai.main")


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------
# Load the initial inventory snapshot before the first request is served.
# Later refreshes go through PUT /inventory.
@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.INVENTORY_PATH:
        device_inventory.update(load_inventory_file(settings.INVENTORY_PATH))
    else:
        logger.warning("INVENTORY_PATH not set - starting with an empty inventory")
    yield


# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# command.router: POST /command, GET /command/stats
# inventory.router: GET/PUT /inventory
app.include_router(command.router)
app.include_router(inventory.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Does NOT call the completion service.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "homeai.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
