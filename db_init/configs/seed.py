"""
Seed behaviour settings.

Dependencies: pydantic, pydantic_settings
System role: Toggles for the seed insert step
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from db_init.configs.base import BaseSettings


class SeedSettings(BaseSettings):
    """Controls how the fixed seed batch is written."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SEED_",
        case_sensitive=False,
        extra="ignore",
    )

    skip_existing: bool = Field(
        default=False,
        description=(
            "Skip seed rows already present (matched on first name, last name, ZIP). "
            "When false every invocation re-inserts the full batch."
        ),
    )
