"""Environment-driven settings for the reservation service."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).resolve().parents[3] / ".env"


class Settings(BaseSettings):
    """Typed application configuration.

    ``RESERVATION_LEAD_DAYS`` has no default: whether same-day online booking
    is allowed is a per-restaurant decision and must be stated explicitly.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = Field("local", alias="APP_ENV")
    app_name: str = "Bistro Reservations API"
    api_v1_prefix: str = "/api/v1"

    # storage
    database_url: str = Field(..., alias="DATABASE_URL")
    sync_database_url: str | None = Field(default=None, alias="SYNC_DATABASE_URL")

    # tokens
    secret_key: str = Field(..., alias="SECRET_KEY")
    jwt_secret_key: str | None = Field(default=None, alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, ge=1, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # booking calendar
    restaurant_timezone: str = Field("Asia/Tokyo", alias="RESTAURANT_TIMEZONE")
    reservation_lead_days: int = Field(..., ge=0, alias="RESERVATION_LEAD_DAYS")
    reservation_daily_capacity: int = Field(8, ge=0, alias="RESERVATION_DAILY_CAPACITY")
    availability_horizon_days: int = Field(90, ge=1, le=366, alias="AVAILABILITY_HORIZON_DAYS")
    closure_cache_ttl_seconds: float = Field(30.0, ge=0, alias="CLOSURE_CACHE_TTL_SECONDS")

    bootstrap_admin_email: str | None = Field(default=None, alias="BOOTSTRAP_ADMIN_EMAIL")
    bootstrap_admin_password: str | None = Field(default=None, alias="BOOTSTRAP_ADMIN_PASSWORD")

    # edge
    redis_url: str | None = Field(default=None, alias="REDIS_URL")
    rate_limit_default: str = Field("100/minute", alias="RATE_LIMIT_DEFAULT")
    rate_limit_login: str = Field("10/minute", alias="RATE_LIMIT_LOGIN")
    rate_limit_booking: str = Field("5/minute", alias="RATE_LIMIT_BOOKING")
    cors_allow_origins: str = Field("http://localhost:5173", alias="CORS_ALLOW_ORIGINS")
    cors_allow_credentials: bool = Field(default=False, alias="CORS_ALLOW_CREDENTIALS")

    @model_validator(mode="after")
    def _require_complete_bootstrap(self) -> "Settings":
        if bool(self.bootstrap_admin_email) != bool(self.bootstrap_admin_password):
            raise ValueError(
                "BOOTSTRAP_ADMIN_EMAIL and BOOTSTRAP_ADMIN_PASSWORD must be set together"
            )
        return self

    @property
    def token_signing_key(self) -> str:
        return self.jwt_secret_key or self.secret_key

    @property
    def cors_origin_list(self) -> list[str]:
        """Comma-separated ``CORS_ALLOW_ORIGINS`` as a list."""
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()  # type: ignore[call-arg]
