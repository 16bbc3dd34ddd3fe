"""Application settings loaded from environment / .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ──────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./parkasmart.db"

    # ── Redis (receipt queue) ─────────────────────────────
    redis_url: str = "redis://localhost:6379/0"

    # ── Africa's Talking SMS ──────────────────────────────
    at_username: str = "sandbox"
    at_api_key: str = ""  # MUST be set for real delivery
    at_sender_id: str = ""

    # Destination of the daily report; empty means not configured
    manager_phone: str = ""

    # ── Business rules ────────────────────────────────────
    timezone: str = "Africa/Nairobi"
    reference_prefix: str = "PS"
    tenant_rate: int = 300
    non_tenant_rate: int = 300

    # ── HTTP ──────────────────────────────────────────────
    allowed_origins: str = "*"


@lru_cache
def get_settings() -> Settings:
    return Settings()
