"""
Top‑level router of the API.

Aggregates domain‑specific routers.  When new domains are introduced,
update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, tags=["health"])
