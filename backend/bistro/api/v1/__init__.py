"""Versioned API router."""

from fastapi import APIRouter

from . import auth, availability, blocked_dates, closures, health, reservations, rpc

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(availability.router, tags=["availability"])
router.include_router(closures.router, tags=["closures"])
router.include_router(blocked_dates.router, tags=["blocked-dates"])
router.include_router(reservations.router, tags=["reservations"])
router.include_router(rpc.router, tags=["rpc"])

__all__ = ["router"]
