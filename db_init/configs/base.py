"""
Base configuration settings.

Shared by every settings class of the initializer Lambda. The stack sets
ENVIRONMENT and LOG_LEVEL on the function; a local .env file is honoured
for runs outside Lambda.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Common settings read without a prefix."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="dev",
        description="Stack environment the function belongs to (dev, staging, prod)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the handler (DEBUG, INFO, WARNING, ERROR)",
    )
