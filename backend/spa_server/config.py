"""Application configuration via pydantic-settings.

The defaults are the complete configuration: 127.0.0.1:3000, the bundle in
frontend/dist, index.html, any origin, GET and POST. Nothing needs to be set.
``SPA_*`` environment variables (or a project-root .env) may override a field.
"""

import os
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the project root (this file lives at backend/spa_server/config.py)
_PROJECT_DIR = Path(__file__).resolve().parent.parent.parent

# Output directory of the front-end build step
_DEFAULT_ASSETS_DIR = _PROJECT_DIR / "frontend" / "dist"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bind address
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Static bundle
    ASSETS_DIR: str = str(_DEFAULT_ASSETS_DIR)
    INDEX_DOCUMENT: str = "index.html"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_METHODS: List[str] = ["GET", "POST"]

    # Logging
    LOG_LEVEL: str = "info"

    @property
    def assets_path(self) -> Path:
        return Path(self.ASSETS_DIR)


def _build_settings() -> Settings:
    """Build settings, fixing a relative assets directory to be absolute."""
    s = Settings(
        _env_file=str(_PROJECT_DIR / ".env"),
        _env_file_encoding="utf-8",
    )
    # Relative ASSETS_DIR is taken from the project root, not the cwd
    if not os.path.isabs(s.ASSETS_DIR):
        s.ASSETS_DIR = str(_PROJECT_DIR / s.ASSETS_DIR)
    return s


settings = _build_settings()
