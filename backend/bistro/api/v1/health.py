"""Liveness probe."""

from datetime import UTC, datetime

from fastapi import APIRouter

from bistro.core.config import get_settings
from bistro.core.timezones import restaurant_today

router = APIRouter()


@router.get("", summary="Service health status")
async def healthcheck() -> dict[str, str]:
    """Report the service name and the restaurant's current calendar date."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.app_env,
        "server_time": datetime.now(UTC).isoformat(),
        "restaurant_today": restaurant_today().to_canonical_string(),
    }
