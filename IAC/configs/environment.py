"""
Stack configuration loader.

Loads configuration from Pulumi stack config. The PostgreSQL versions may
also come from POSTGRESFULLVERSION / POSTGRESMAJORVERSION in the environment
or a local .env file.
"""

import os

import pulumi
from dotenv import load_dotenv

from IAC.configs.base import StackConfig
from IAC.configs.constants import DEFAULT_DB_SECRET_NAME, LAMBDA_DEFAULTS, RDS_DEFAULTS

# Load environment variables from .env file
load_dotenv()


def _require_version(config: pulumi.Config, key: str, env_var: str, example: str) -> str:
    """Read a version from stack config, falling back to an env var."""
    value = config.get(key) or os.getenv(env_var, "")
    if not value:
        raise ValueError(
            f'Value missing for environment variable: {env_var}. For example, "{example}"'
        )
    return value


def get_config() -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    Returns:
        StackConfig: Validated configuration object

    Raises:
        ValueError: If the PostgreSQL versions are not configured
    """
    config = pulumi.Config()

    return StackConfig(
        environment=config.get("environment") or "dev",
        postgres_full_version=_require_version(
            config, "postgres_full_version", "POSTGRESFULLVERSION", "14.2"
        ),
        postgres_major_version=_require_version(
            config, "postgres_major_version", "POSTGRESMAJORVERSION", "14"
        ),
        db_secret_name=config.get("db_secret_name") or DEFAULT_DB_SECRET_NAME,
        database_name=config.get("database_name") or str(RDS_DEFAULTS["database_name"]),
        rds_instance_class=config.get("rds_instance_class") or str(RDS_DEFAULTS["instance_class"]),
        rds_allocated_storage=int(
            config.get("rds_allocated_storage") or RDS_DEFAULTS["allocated_storage"]
        ),
        lambda_artifact=config.get("lambda_artifact") or str(LAMBDA_DEFAULTS["artifact"]),
        lambda_memory=int(config.get("lambda_memory") or LAMBDA_DEFAULTS["memory_mb"]),
        lambda_timeout=int(config.get("lambda_timeout") or LAMBDA_DEFAULTS["timeout_seconds"]),
    )
