"""
Database connection management.

One engine and one connection per invocation. NullPool keeps nothing open
between invocations; the connection and engine are released on every exit
path of open_connection().

Dependencies: sqlalchemy, psycopg
System role: Database connection lifecycle for the seeder
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from db_init.configs.database import DatabaseSettings
from db_init.core.exceptions import DatabaseConnectionError
from db_init.models.seed_record import DatabaseCredentials

logger = logging.getLogger(__name__)


def build_database_url(db_config: DatabaseSettings, credentials: DatabaseCredentials) -> URL:
    """
    Construct the SQLAlchemy URL for the psycopg driver.

    URL.create escapes the password, so secrets containing '@' or '/' are safe.
    """
    return URL.create(
        "postgresql+psycopg",
        username=credentials.username,
        password=credentials.password,
        host=db_config.host,
        port=db_config.port,
        database=credentials.dbname,
    )


def create_db_engine(db_config: DatabaseSettings, credentials: DatabaseCredentials) -> Engine:
    """
    Create an unpooled SQLAlchemy engine for a single invocation.

    Args:
        db_config: Endpoint settings (host, port, timeouts)
        credentials: Resolved secret

    Returns:
        Engine: Engine using NullPool
    """
    return create_engine(
        build_database_url(db_config, credentials),
        echo=db_config.echo_sql,
        poolclass=NullPool,
        connect_args={
            "connect_timeout": db_config.connect_timeout,
            "sslmode": db_config.sslmode,
        },
    )


@contextmanager
def open_connection(
    db_config: DatabaseSettings,
    credentials: DatabaseCredentials,
) -> Iterator[Connection]:
    """
    Open one database connection and guarantee its release.

    Args:
        db_config: Endpoint settings
        credentials: Resolved secret

    Yields:
        Connection: Open SQLAlchemy connection

    Raises:
        DatabaseConnectionError: Network or authentication failure on connect

    Usage:
        with open_connection(settings.database, credentials) as conn:
            ensure_schema(conn)
    """
    engine = create_db_engine(db_config, credentials)
    try:
        connection = engine.connect()
    except SQLAlchemyError as e:
        engine.dispose()
        logger.error(
            "open_connection - %s: %s",
            type(e).__name__,
            e,
            extra={"host": db_config.host, "port": db_config.port},
        )
        raise DatabaseConnectionError(
            f"Could not connect to database: {type(e).__name__}",
            host=db_config.host,
        ) from e

    logger.info(
        "open_connection - Connected",
        extra={"host": db_config.host, "dbname": credentials.dbname},
    )
    try:
        yield connection
    finally:
        connection.close()
        engine.dispose()
        logger.info("open_connection - Connection closed")
