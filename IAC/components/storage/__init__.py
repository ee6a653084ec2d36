"""
Storage components.

Components:
- RdsPostgresComponent: RDS PostgreSQL database
"""

from IAC.components.storage.rds_postgres import RdsPostgresComponent, RdsOutputs

__all__ = [
    "RdsPostgresComponent",
    "RdsOutputs",
]
