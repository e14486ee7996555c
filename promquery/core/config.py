"""
Centralised client settings loaded from environment / .env file.
"""
from __future__ import annotations

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load .env from project root (two levels up from this file)
_ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(_ENV_PATH)

DEFAULT_BASE_URL = "http://127.0.0.1:9090/api/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROMQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── HTTP API ─────────────────────────────────────────
    base_url: str = DEFAULT_BASE_URL
    request_timeout_seconds: float = 30.0

    # ── App ──────────────────────────────────────────────
    log_level: str = "INFO"

    @property
    def api_url(self) -> str:
        return self.base_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
