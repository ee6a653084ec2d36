"""
Unified seeder settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the Lambda
"""

from functools import lru_cache

from pydantic import Field

from db_init.configs.base import BaseSettings
from db_init.configs.database import DatabaseSettings
from db_init.configs.seed import SeedSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    seed: SeedSettings = Field(default_factory=SeedSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get seeder settings singleton.

    Environment variables are read once per Lambda container.
    Tests that change the environment must call get_settings.cache_clear().

    Returns:
        Settings: Seeder settings instance
    """
    return Settings()
