"""
Base configuration dataclass for stack settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StackConfig:
    """
    Configuration for the PostgreSQL seed stack.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        postgres_full_version: Engine version, e.g. "14.2"
        postgres_major_version: Major version, e.g. "14" (parameter group family)
        db_secret_name: Existing Secrets Manager secret with {username, password, dbname}
        database_name: Initial database created on the instance
        rds_instance_class: RDS instance class for PostgreSQL
        rds_allocated_storage: RDS storage in GB
        lambda_artifact: Path to the zipped initializer package
        lambda_memory: Lambda function memory in MB
        lambda_timeout: Lambda function timeout in seconds
    """
    environment: str
    postgres_full_version: str
    postgres_major_version: str
    db_secret_name: str
    database_name: str
    rds_instance_class: str
    rds_allocated_storage: int
    lambda_artifact: str
    lambda_memory: int
    lambda_timeout: int

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def parameter_group_family(self) -> str:
        """RDS parameter group family for the major version."""
        return f"postgres{self.postgres_major_version}"
