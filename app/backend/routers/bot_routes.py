from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..controllers import BotController, UploadController
from ..libs import Logger
from ..libs.dependencies import get_bots_dir, get_registry, get_store
from ..models.bot import (
    ApiResponse,
    BotListResponse,
    BotLogsResponse,
    BotStatusResponse,
    BotUploadResponse,
)

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #
# Routers
# --------------------------------------------------------------------------- #

bots_router = APIRouter(
    prefix="/api/bots",
    tags=["Bots"],
)
"""Per-owner bot listing API Router"""

bot_operations_router = APIRouter(
    prefix="/api/bot",
    tags=["Bot Operations"],
)
"""Bot upload and lifecycle API Router"""

# --------------------------------------------------------------------------- #
# Common docs components
# --------------------------------------------------------------------------- #
example_bot = {
    "id": "alice_echoBot_1704110400000",
    "name": "echoBot",
    "username": "alice",
    "file_path": "user_bots/alice/alice_echoBot_1704110400000.py",
    "file_type": "py",
    "status": "running",
    "created_at": "2024-01-01T12:00:00Z",
    "started_at": "2024-01-01T12:05:00Z",
    "cpu": 0,
    "memory": 0,
}

not_found_response = {
    "description": "Bot not found.",
    "content": {
        "application/json": {"example": {"success": False, "message": "Bot not found"}}
    },
}

# --------------------------------------------------------------------------- #
# Bot Listing Endpoints
# --------------------------------------------------------------------------- #


@bots_router.get(
    "/{username}",
    summary="List Bots",
    description="List the bots of an owner, with their current liveness.",
    response_description="The owner's bots",
    response_model=BotListResponse,
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Bots retrieved successfully.",
            "content": {
                "application/json": {
                    "example": {"success": True, "bots": [example_bot]}
                }
            },
        },
    },
)
def list_bots_endpoint(
    username: str, store=Depends(get_store), registry=Depends(get_registry)
):
    """List the bots of an owner, with their current liveness."""

    log.debug(f"List Bots endpoint called for username: {username}")
    controller = BotController(store, registry)
    return BotListResponse(bots=controller.list_bots(username))


# --------------------------------------------------------------------------- #
# Bot Upload Endpoint
# --------------------------------------------------------------------------- #


@bot_operations_router.post(
    "/upload",
    summary="Upload Bot",
    description="Upload a script and register it as a stopped bot.",
    response_description="The id of the new bot",
    response_model=BotUploadResponse,
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Bot uploaded successfully.",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "bot_id": example_bot["id"],
                        "message": "Bot uploaded successfully",
                    }
                }
            },
        },
        400: {"description": "Missing required fields."},
    },
)
def upload_bot_endpoint(
    username: Optional[str] = Form(None),
    bot_name: Optional[str] = Form(None),
    bot_file: Optional[UploadFile] = File(None),
    store=Depends(get_store),
    registry=Depends(get_registry),
    bots_dir=Depends(get_bots_dir),
):
    """Upload a script and register it as a stopped bot."""

    log.debug(f"Upload Bot endpoint called with username: {username}")
    controller = UploadController(store, registry, bots_dir)
    bot_id = controller.upload_bot(
        username,
        bot_name,
        bot_file.filename if bot_file else None,
        bot_file.file if bot_file else None,
    )
    return BotUploadResponse(bot_id=bot_id, message="Bot uploaded successfully")


# --------------------------------------------------------------------------- #
# Bot Lifecycle Endpoints
# --------------------------------------------------------------------------- #


@bot_operations_router.post(
    "/start/{bot_id}",
    summary="Start Bot",
    description="Spawn the script of a bot as a child process.",
    response_description="Bot start status message",
    response_model=ApiResponse,
    responses={
        200: {"description": "Bot started successfully."},
        400: {"description": "Bot already running."},
        404: not_found_response,
    },
)
def start_bot_endpoint(
    bot_id: str, store=Depends(get_store), registry=Depends(get_registry)
):
    """Spawn the script of a bot as a child process."""

    log.debug(f"Start Bot endpoint called with bot_id: {bot_id}")
    BotController(store, registry).start_bot(bot_id)
    return ApiResponse(message="Bot started successfully")


@bot_operations_router.post(
    "/stop/{bot_id}",
    summary="Stop Bot",
    description="Send a termination signal to the process of a bot.",
    response_description="Bot stop status message",
    response_model=ApiResponse,
    responses={
        200: {"description": "Bot stopped successfully."},
        400: {"description": "Bot not running."},
        404: not_found_response,
    },
)
def stop_bot_endpoint(
    bot_id: str, store=Depends(get_store), registry=Depends(get_registry)
):
    """Send a termination signal to the process of a bot."""

    log.debug(f"Stop Bot endpoint called with bot_id: {bot_id}")
    BotController(store, registry).stop_bot(bot_id)
    return ApiResponse(message="Bot stopped successfully")


@bot_operations_router.delete(
    "/delete/{bot_id}",
    summary="Delete Bot",
    description="Stop a bot if running, then remove its script and its record.",
    response_description="Bot deletion status message",
    response_model=ApiResponse,
    responses={
        200: {"description": "Bot deleted successfully."},
        404: not_found_response,
    },
)
def delete_bot_endpoint(
    bot_id: str, store=Depends(get_store), registry=Depends(get_registry)
):
    """Stop a bot if running, then remove its script and its record."""

    log.debug(f"Delete Bot endpoint called with bot_id: {bot_id}")
    BotController(store, registry).delete_bot(bot_id)
    return ApiResponse(message="Bot deleted successfully")


@bot_operations_router.get(
    "/logs/{bot_id}",
    summary="Bot Logs",
    description="Synthesized summary of a bot: name, liveness and timestamps.",
    response_description="The log summary",
    response_model=BotLogsResponse,
    responses={
        200: {
            "description": "Logs retrieved successfully.",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "logs": "Bot: echoBot\nStatus: Running\nCreated: 2024-01-01T12:00:00Z\nLast started: 2024-01-01T12:05:00Z\n",
                    }
                }
            },
        },
        404: not_found_response,
    },
)
def bot_logs_endpoint(
    bot_id: str, store=Depends(get_store), registry=Depends(get_registry)
):
    """Synthesized summary of a bot: name, liveness and timestamps."""

    log.debug(f"Bot Logs endpoint called with bot_id: {bot_id}")
    logs = BotController(store, registry).get_logs(bot_id)
    return BotLogsResponse(logs=logs)


@bot_operations_router.get(
    "/status/{bot_id}",
    summary="Bot Status",
    description="Liveness of a bot plus its cpu/memory fields.",
    response_description="The bot status",
    response_model=BotStatusResponse,
    responses={
        200: {
            "description": "Status retrieved successfully.",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "status": "running",
                        "cpu": 0,
                        "memory": 0,
                    }
                }
            },
        },
        404: not_found_response,
    },
)
def bot_status_endpoint(
    bot_id: str, store=Depends(get_store), registry=Depends(get_registry)
):
    """Liveness of a bot plus its cpu/memory fields."""

    log.debug(f"Bot Status endpoint called with bot_id: {bot_id}")
    runtime_status = BotController(store, registry).get_status(bot_id)
    return BotStatusResponse(**runtime_status.model_dump())
