"""
Database configuration settings.

Reads the PostgreSQL endpoint and the credentials secret reference from the
Lambda environment (DB_HOST, DB_SECRET_NAME, ...). Credentials themselves
never live here; they are resolved from Secrets Manager at invocation time.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the seeder
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from db_init.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL endpoint and secret reference."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
    )

    secret_name: str | None = Field(
        default=None,
        description="Secrets Manager name/ARN holding {username, password, dbname}",
    )
    host: str | None = Field(default=None, description="PostgreSQL endpoint address")
    port: int = Field(default=5432, description="PostgreSQL port")

    connect_timeout: int = Field(default=10, description="Connection attempt timeout in seconds")
    sslmode: str = Field(default="prefer", description="libpq SSL mode for RDS connections")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
