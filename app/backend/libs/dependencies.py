from pathlib import Path

from bots.registry import BotRegistry
from fastapi import Request

from .record_store import BotStore


def get_store(request: Request) -> BotStore:
    """FastAPI dependency returning the record store created at startup"""
    return request.app.state.store


def get_registry(request: Request) -> BotRegistry:
    """FastAPI dependency returning the process registry created at startup"""
    return request.app.state.registry


def get_bots_dir(request: Request) -> Path:
    """FastAPI dependency returning the directory tree of uploaded scripts"""
    return request.app.state.bots_dir
