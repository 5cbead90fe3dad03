"""
Centralized settings read from the environment / .env.
`SITE_URL` is read as-is (no validation); a bad value surfaces at navigation.
"""
# @file purpose: Centralized settings using Pydantic Settings.

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UIT_", env_file=".env", extra="ignore", populate_by_name=True
    )

    site_url: str = Field(default="", validation_alias=AliasChoices("SITE_URL", "UIT_SITE_URL"))
    browsers: list[str] = ["Firefox"]
    headless: bool = True
    default_timeout_seconds: float = 10.0
    poll_interval_seconds: float = 0.5
    driver_dir: Path | None = None
    artifacts_dir: Path | None = None
    log_level: str = "INFO"


settings = Settings()
