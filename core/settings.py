"""Environment configuration for Kurama."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    ENV: str = "dev"

    STORE_INITIAL_CAPACITY: int = 10
    STORE_MAX_CAPACITY: Optional[int] = None

    MAX_PROCESSORS: int = 10
    ROSTER_PATH: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="KURAMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def is_prod(self) -> bool:
        return self.ENV.lower() == "prod"

    def roster_path(self) -> Optional[Path]:
        if not self.ROSTER_PATH:
            return None
        path = Path(self.ROSTER_PATH)
        if not path.exists():
            raise RuntimeError(f"processor roster not found: {path}")
        return path


settings = Settings()
