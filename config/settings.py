"""
config/settings.py

- Reads environment variables defined in .env and exposes them as the app-wide settings object.
- Uses pydantic v2 / pydantic-settings v2.
- Every field has a default so the API (and the test suite) start without a .env file.
"""

from typing import List, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # App / runtime
    # =========================
    ENV: Literal["dev", "stage", "prod"] = "dev"
    APP_TITLE: str = "School Report Card API"
    APP_DESCRIPTION: str = "Assessment scores, exam results, attendance and report card computation"
    APP_VERSION: str = "1.0.0"

    # =========================
    # CORS
    # =========================
    # comma separated string -> List[str]
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" -> ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # Seed data (in-memory store)
    # =========================
    SEED_DATA_DIR: str = "data"
    SEED_ON_STARTUP: bool = True

    # =========================
    # Academic calendar
    # =========================
    DEFAULT_ACADEMIC_YEAR: str = "2024-2025"

    # =========================
    # Logging / Misc
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# ✅ import `settings` anywhere to read configuration
settings = Settings()
