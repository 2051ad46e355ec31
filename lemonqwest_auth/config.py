"""Auth configuration using pydantic-settings"""

from pathlib import Path
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Auth configuration from environment variables (LEMONQWEST_AUTH_*)"""

    model_config = SettingsConfigDict(
        env_prefix="LEMONQWEST_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Session store
    session_backend: Literal["memory", "redis", "dynamodb"] = Field(
        default="memory",
        description="Session store backend",
    )
    session_slot_id: str = Field(
        default="current",
        description="Key of the session item (DynamoDB backend)",
    )

    # Redis
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (redis backend)",
    )
    redis_key_prefix: str = Field(
        default="lemonqwest:session:",
        description="Key prefix for the session hash",
    )

    # DynamoDB
    dynamodb_table: str = Field(
        default="lemonqwest-sessions",
        description="DynamoDB table holding the session item",
    )
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region of the DynamoDB table",
    )

    # User directory
    users_file: Optional[Path] = Field(
        default=None,
        description="JSON users file; an empty in-memory directory is used when unset",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


# Singleton settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
