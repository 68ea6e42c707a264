"""
FastAPI dependencies.
"""

from fastapi import Request

from app.config import Settings, settings
from app.services.store import SavingsStore


def get_store(request: Request) -> SavingsStore:
    """
    Store built once at startup and kept on the application state.
    """
    return request.app.state.store


def get_settings() -> Settings:
    return settings
