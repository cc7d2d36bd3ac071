"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    logoforge_env: str = "development"
    logoforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    default_color: str = "currentColor"
    default_knockout: str = "white"

    # Batch generation thread pool (1 = sequential)
    batch_workers: int = 1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
