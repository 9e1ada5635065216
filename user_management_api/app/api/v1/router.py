"""
Top‑level router for version 1 of the API.

Aggregates the users and health routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
