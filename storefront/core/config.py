# storefront/core/config.py
from functools import lru_cache
from typing import Literal

from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict

# Gate applied to category write routes: "none" | "auth" | "admin".
CategoryGate = Literal["none", "auth", "admin"]


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (store connection string)
      - ACCESS_TOKEN_SECRET (signing secret for bearer tokens)

    Optional:
      - CATEGORY_GATE (none | auth | admin) for category write routes
      - CORS_ORIGINS, LOG_LEVEL, HOST, PORT
    """

    PROJECT_NAME: str = "Storefront API"
    API_PREFIX: str = ""

    DATABASE_URL: str

    # Token signing (backend-side)
    ACCESS_TOKEN_SECRET: str
    JWT_ALG: str = "HS256"

    CATEGORY_GATE: CategoryGate = "none"

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()


def app_settings(request: Request) -> Settings:
    """FastAPI dependency: the Settings the running app was built with."""
    return request.app.state.settings
