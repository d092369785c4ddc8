"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import bookings, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
# The bookings router defines its own "/bookings" paths.
router.include_router(bookings.router, tags=["bookings"])
