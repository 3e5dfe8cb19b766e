"""HTTP routers mounted under the versioned prefix."""

from fastapi import APIRouter

from bistro.api.v1 import router as v1_router
from bistro.core.config import get_settings

api_router = APIRouter(prefix=get_settings().api_v1_prefix)
api_router.include_router(v1_router)

__all__ = ["api_router"]
