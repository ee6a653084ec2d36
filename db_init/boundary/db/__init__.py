"""
Database boundary layer: ORM model and per-invocation connection management.

Exports:
  - Base: Declarative base
  - EmployeeModel: Seed target table
  - create_db_engine(), open_connection(): Connection lifecycle

Dependencies: sqlalchemy, psycopg
"""

from db_init.boundary.db.base import Base
from db_init.boundary.db.connection import build_database_url, create_db_engine, open_connection
from db_init.boundary.db.models.employee_model import EmployeeModel

__all__ = [
    "Base",
    "EmployeeModel",
    "build_database_url",
    "create_db_engine",
    "open_connection",
]
