"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="WIDGETLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Bindings
    strict_bindings: bool = Field(
        default=False,
        description="Reject indirect bindings without 'via' instead of compiling a dead rule",
    )

    # Dispatch
    serialize_async_handlers: bool = Field(
        default=False,
        description="Allow at most one in-flight async handler per target (latest wins)",
    )

    # Widgets
    chart_refresh_delay: float = Field(
        default=0.5, ge=0.0, description="Chart data refresh delay (seconds)"
    )

    # Configuration document limits
    max_config_size: int = Field(default=512 * 1024, gt=0, description="Max config document size")
    max_config_depth: int = Field(default=20, gt=0, description="Max config nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
