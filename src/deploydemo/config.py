"""
Environment-backed settings for the server and the client.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Folder: src/deploydemo/server/static/
DEFAULT_STATIC_DIR = Path(__file__).parent / "server" / "static"

DEFAULT_PORT = 3001
DEFAULT_API_URL = f"http://localhost:{DEFAULT_PORT}"


class ServingMode(str, Enum):
    """
    How the server process is deployed.

    API_ONLY: only the /api routes; the frontend is hosted elsewhere.
    COMBINED: /api routes plus the bundled single-page app with an
              index.html fallback for client-side routes.
    """

    API_ONLY = "api_only"
    COMBINED = "combined"


class ServerSettings(BaseSettings):
    """Settings consumed by the API server."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    environment: str = Field(default="development", description="production enables combined serving")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    static_dir: Path = Field(default=DEFAULT_STATIC_DIR)
    log_level: str = Field(default="INFO")

    @property
    def serving_mode(self) -> ServingMode:
        if self.environment.strip().lower() == "production":
            return ServingMode.COMBINED
        return ServingMode.API_ONLY


class ClientSettings(BaseSettings):
    """Settings consumed by the client application."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the API server")
    api_timeout: float = Field(default=10.0, gt=0)


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Return cached server settings."""
    return ServerSettings()


def resolve_api_url(override: Optional[str] = None) -> str:
    """
    Resolve the client's API base URL once.

    An explicit override wins, then API_URL from the environment, then the
    local-development default.
    """
    if override:
        return override.rstrip("/")
    return ClientSettings().api_url.rstrip("/")
