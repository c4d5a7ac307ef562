from fastapi import APIRouter
from ..libs import Logger

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #
# Routers
# --------------------------------------------------------------------------- #

root_router = APIRouter()
"""Root API Router"""

core_router = APIRouter(
    prefix="/core",
    tags=["Core"],
)
"""Core API Router for system endpoints"""

# --------------------------------------------------------------------------- #
# Root Endpoints
# --------------------------------------------------------------------------- #


@root_router.get(
    "/",
    summary="API Root",
    description="Liveness probe of the bot hosting service.",
    response_description="API status message",
    response_model=dict,
    responses={
        200: {
            "description": "API is running.",
            "content": {
                "application/json": {
                    "example": {"success": True, "status": "Bot Hosting API is running"}
                }
            },
        }
    },
)
def api_root():
    """Liveness probe of the bot hosting service."""
    log.debug("API Root endpoint called.")
    return {"success": True, "status": "Bot Hosting API is running"}


# --------------------------------------------------------------------------- #
# Core Endpoints
# --------------------------------------------------------------------------- #


@core_router.get(
    "/healthcheck",
    summary="Healthcheck",
    description="Healthcheck endpoint to verify if service is running.",
    response_description="Status of service",
    response_model=dict,
    responses={
        200: {
            "description": "Service is running.",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "API is running",
                        "status": "OK",
                    }
                }
            },
        }
    },
)
def healthcheck():
    """Healthcheck endpoint to verify if service is running."""
    return {"success": True, "message": "API is running", "status": "OK"}
