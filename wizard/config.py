"""Application configuration using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wizard.constants import MAX_PLAYERS, MIN_PLAYERS


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``WIZARD_``."""

    model_config = SettingsConfigDict(
        env_prefix="WIZARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    # Game Configuration
    min_players: int = Field(default=MIN_PLAYERS, description="Minimum players per game")
    max_players: int = Field(default=MAX_PLAYERS, description="Maximum players per game")
    seed: Optional[int] = Field(default=None, description="Seed for deck shuffling")

    # Bot Configuration
    default_bot_strategy: str = Field(default="random", description="Default bot strategy")


# Global settings instance
settings = Settings()
