"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vectormap_log_level: str = "info"

    # Map lookup
    map_search_paths: list[str] = ["."]
    map_extension: str = ".svg"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
