"""Application configuration: Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Operational settings. None of these are part of the HTTP contract."""

    app_name: str = "Universal Links Test"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = "/api"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Storage (relative paths resolved from backend/ at runtime)
    files_dir: str = "./public/files"
    files_url_prefix: str = "/files/"

    uvicorn_workers: int = 1

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="ULTEST_",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and not value.startswith("["):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, list):
            return value
        return ["http://localhost:3000"]

    @field_validator("files_url_prefix")
    @classmethod
    def normalize_url_prefix(cls, value: str) -> str:
        value = "/" + value.strip("/")
        return value if value == "/" else value + "/"

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure the storage directory is absolute."""
        base = Path(__file__).resolve().parent.parent  # backend/
        if not Path(self.files_dir).is_absolute():
            self.files_dir = str(base / self.files_dir)
        return self

    @property
    def files_mount_path(self) -> str:
        """URL prefix without the trailing slash, as Starlette mounts expect."""
        return self.files_url_prefix.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
