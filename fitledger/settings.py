from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (``FIREBASE_DATABASE_URL``),
    # so matching is case-insensitive.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    firebase_database_url: str = ""
    firebase_auth_token: Optional[str] = None
    store_backend: Literal["firebase", "memory"] = "firebase"
    store_timeout: float = 30.0
    default_timezone: str = "UTC"
    usda_api_key: Optional[str] = None
    usda_api_url: str = "https://api.nal.usda.gov/fdc/v1"
    usda_timeout: float = 10.0


@lru_cache()
def get_settings() -> Settings:
    return Settings()
