"""
Central settings module.

All configuration comes from environment variables (or .env in local dev).
Never import settings directly from this file — always use the `settings`
singleton at the bottom so the entire package shares one instance.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # silently ignore unrecognised env vars
        case_sensitive=False,
    )

    # ── Environment ────────────────────────────────────────────────────────
    environment: str = "development"
    log_level: str = "INFO"

    # ── Re-verification ────────────────────────────────────────────────────
    # Baseline staleness window (days) for a moderate-confidence (50–74)
    # acceptance record. Higher scores stretch it, lower scores shrink it.
    reverification_baseline_days: int = Field(default=90, gt=0)

    # ── Recalculation job ──────────────────────────────────────────────────
    recalculation_batch_size: int = Field(default=100, gt=0)


# Singleton — import this everywhere
settings = Settings()
