"""
Core seeder logic.

Contains the exception hierarchy, the Employee seeder and outcome reporting.
"""

from db_init.core.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    QueryError,
    SecretResolutionError,
    SeederError,
)
from db_init.core.reporter import ReportStatus, build_response, send_response
from db_init.core.seeder import EmployeeSeeder

__all__ = [
    # Exceptions
    "SeederError",
    "ConfigurationError",
    "SecretResolutionError",
    "DatabaseConnectionError",
    "QueryError",
    # Seeder
    "EmployeeSeeder",
    # Reporting
    "ReportStatus",
    "build_response",
    "send_response",
]
