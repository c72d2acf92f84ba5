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
        env_prefix="SPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Patch limits
    max_value_depth: int = Field(default=20, gt=0, description="Max nesting depth of a patch value")
    max_payload_size: int = Field(
        default=512 * 1024, gt=0, description="Max size of a structured patch payload (bytes)"
    )

    # Streaming
    stream_encoding: str = Field(default="utf-8", description="Encoding of raw byte streams")
    snapshot_on_patch: bool = Field(
        default=True, description="Hand a spec snapshot to listeners after every applied patch"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
