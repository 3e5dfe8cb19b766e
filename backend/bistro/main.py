"""ASGI application for the reservation service."""

import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis  # type: ignore[import-untyped]
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi_limiter import FastAPILimiter
from secure import Secure

from bistro.api import api_router
from bistro.core.config import get_settings
from bistro.security.logging_filters import SensitiveFilter
from bistro.services.bootstrap_service import ensure_bootstrap_admin

logger = logging.getLogger(__name__)

settings = get_settings()

_LOGGERS_TO_SCRUB = ("", "uvicorn", "uvicorn.access", "uvicorn.error", "bistro")


def _install_log_filters() -> None:
    for name in _LOGGERS_TO_SCRUB:
        target = logging.getLogger(name)
        if not any(isinstance(flt, SensitiveFilter) for flt in target.filters):
            target.addFilter(SensitiveFilter())


async def _connect_rate_limiter() -> redis.Redis | None:
    """Attach fastapi-limiter to redis; limits stay off when redis is absent."""
    if not settings.redis_url:
        logger.info("REDIS_URL not set; rate limiting disabled")
        return None
    pool = redis.from_url(settings.redis_url, encoding="utf-8", decode_responses=True)
    try:
        await FastAPILimiter.init(pool)
    except (redis.RedisError, OSError):
        logger.exception("Rate limiter could not reach %s; continuing without limits", settings.redis_url)
        await pool.aclose()
        return None
    return pool


@asynccontextmanager
async def lifespan(_: FastAPI):
    pool = await _connect_rate_limiter()
    await ensure_bootstrap_admin()
    logger.info(
        "Serving reservations for %s (lead days %d, %d per day)",
        settings.restaurant_timezone,
        settings.reservation_lead_days,
        settings.reservation_daily_capacity,
    )
    try:
        yield
    finally:
        if pool is not None:
            await FastAPILimiter.close()
            await pool.aclose()


_install_log_filters()

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)
app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")

_secure_headers = Secure.with_default_headers()


@app.middleware("http")
async def _security_headers(request: Request, call_next):
    response = await call_next(request)
    _secure_headers.set_headers(response)
    return response


app.include_router(api_router)
