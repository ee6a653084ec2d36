"""
Infrastructure constants for the PostgreSQL seed stack.

Contains CIDR blocks, ports, and default configurations.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Number of availability zones spanned by the VPC
MAX_AZS: Final[int] = 2

# Subnet CIDR blocks, one per AZ
SUBNET_CIDRS: Final[dict[str, list[str]]] = {
    "public": ["10.0.0.0/24", "10.0.1.0/24"],    # NAT gateway
    "private": ["10.0.2.0/24", "10.0.3.0/24"],   # RDS + initializer Lambda
}

# RDS defaults
RDS_DEFAULTS: Final[dict[str, str | int]] = {
    "instance_class": "db.t3.micro",
    "allocated_storage": 20,
    "storage_type": "gp2",
    "database_name": "MyDatabase",
}

# Lambda configuration
LAMBDA_DEFAULTS: Final[dict[str, int | str]] = {
    "memory_mb": 256,
    "timeout_seconds": 60,
    "runtime": "python3.12",
    "handler": "db_init.lambda_handler.handler",
    "artifact": "build/db_init.zip",
}

# Name of the pre-existing credentials secret
DEFAULT_DB_SECRET_NAME: Final[str] = "db_secret"

# Project identifier used in resource names and the Project tag
PROJECT_NAME: Final[str] = "employee-db-seeder"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": PROJECT_NAME,
    "ManagedBy": "pulumi",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "postgres": 5432,
}
