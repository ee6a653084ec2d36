"""
Employee table seeder.

Two statements, each committed on its own:
1. CREATE TABLE IF NOT EXISTS employee (idempotent)
2. INSERT of the fixed seed batch

The schema commit is independent of the insert, so a failed insert leaves
the table in place.

Dependencies: sqlalchemy, db_init.boundary.db
System role: Schema + seed data procedure
"""

import logging
from collections.abc import Iterable

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from db_init.boundary.db.base import Base
from db_init.boundary.db.models.employee_model import EmployeeModel
from db_init.core.exceptions import QueryError
from db_init.models.seed_record import SEED_RECORDS, SeedRecord

logger = logging.getLogger(__name__)


class EmployeeSeeder:
    """Create the Employee table and write seed rows through one connection."""

    def __init__(self, connection: Connection) -> None:
        """
        Initialize with an open connection.

        Args:
            connection: SQLAlchemy connection owned by the caller
        """
        self.connection = connection
        self.table = EmployeeModel.__table__

    def ensure_schema(self) -> None:
        """
        Create the Employee table if it does not already exist.

        Safe to run repeatedly; an existing table is left unchanged.

        Raises:
            QueryError: DDL failed
        """
        try:
            with self.connection.begin():
                Base.metadata.create_all(
                    self.connection,
                    tables=[self.table],
                    checkfirst=True,
                )
        except SQLAlchemyError as e:
            logger.error("ensure_schema - %s: %s", type(e).__name__, e)
            raise QueryError(
                f"Failed to create table: {type(e).__name__}",
                statement="create_table",
            ) from e

        logger.info("ensure_schema - Table ready", extra={"table": self.table.name})

    def insert_seed_records(
        self,
        records: Iterable[SeedRecord] = SEED_RECORDS,
        skip_existing: bool = False,
    ) -> int:
        """
        Insert seed rows.

        Without skip_existing every call inserts the full batch, so repeated
        runs duplicate rows. With skip_existing, rows whose
        (firstname, lastname, zip) already exist are left out.

        Args:
            records: Rows to insert
            skip_existing: Filter out rows already present

        Returns:
            int: Number of rows inserted

        Raises:
            QueryError: DML failed (nothing from this batch is committed)
        """
        pending = list(records)
        try:
            with self.connection.begin():
                if skip_existing:
                    existing = self._existing_keys()
                    pending = [r for r in pending if r.natural_key not in existing]

                if pending:
                    self.connection.execute(
                        insert(self.table),
                        [r.to_row() for r in pending],
                    )
        except SQLAlchemyError as e:
            logger.error("insert_seed_records - %s: %s", type(e).__name__, e)
            raise QueryError(
                f"Failed to insert seed data: {type(e).__name__}",
                statement="insert_seed_data",
            ) from e

        logger.info(
            "insert_seed_records - Inserted rows",
            extra={"inserted": len(pending), "skip_existing": skip_existing},
        )
        return len(pending)

    def _existing_keys(self) -> set[tuple[str, str, str]]:
        """Natural keys already in the table."""
        rows = self.connection.execute(
            select(self.table.c.firstname, self.table.c.lastname, self.table.c.zip)
        )
        return {(row.firstname, row.lastname, row.zip) for row in rows}
