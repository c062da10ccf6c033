from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FITFOCUS_",
        extra="ignore",
    )

    playback_output: str = "focus.json"
    playback_delay_ms: int = 250
    verbose: bool = False
