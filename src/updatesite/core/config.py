# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from updatesite.core.constants import (
    DEFAULT_REFRESH_INTERVAL,
    DEFAULT_SITE_ID,
    ENTRY_POINT_GROUP,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UPDATESITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Site
    root_dir: Path = Path(".")
    site_id: str = DEFAULT_SITE_ID
    update_site_url: str = ""
    refresh_interval: int = DEFAULT_REFRESH_INTERVAL

    @field_validator("update_site_url")
    @classmethod
    def _validate_update_site_url(cls, v: str) -> str:
        v = v.strip()
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("Update site URL must start with http:// or https://")
        return v

    # Installed-plugin registry
    installed_manifest: Path | None = None
    entry_point_group: str = ENTRY_POINT_GROUP

    # HTTP fetch
    fetch_timeout: float = 30.0

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_keys: Annotated[list[str], NoDecode] = []

    @field_validator("api_keys", mode="before")
    @classmethod
    def _parse_api_keys(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [k.strip() for k in v.split(",") if k.strip()]
        return v if isinstance(v, list) else []

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
