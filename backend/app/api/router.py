"""
Main API router.
"""

from fastapi import APIRouter
from app.api import dashboard

api_router = APIRouter()

api_router.include_router(dashboard.router)
