"""Unit tests for database connection management."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import NullPool

from db_init.boundary.db.connection import build_database_url, create_db_engine, open_connection
from db_init.configs.database import DatabaseSettings
from db_init.core.exceptions import DatabaseConnectionError
from db_init.models.seed_record import DatabaseCredentials


@pytest.fixture
def db_config():
    """Endpoint settings for a fake RDS host."""
    return DatabaseSettings(host="db.example.internal", secret_name="db_secret")


class TestBuildDatabaseUrl:
    def test_url_components(self, db_config, credentials):
        url = build_database_url(db_config, credentials)

        assert url.drivername == "postgresql+psycopg"
        assert url.host == "db.example.internal"
        assert url.port == 5432
        assert url.username == "postgres"
        assert url.password == "s3cr3t"
        assert url.database == "MyDatabase"

    def test_password_special_characters_escaped(self, db_config):
        """Characters meaningful in URLs survive rendering."""
        credentials = DatabaseCredentials(username="admin", password="p@ss/w:rd", dbname="db")

        rendered = build_database_url(db_config, credentials).render_as_string(hide_password=False)

        assert "p%40ss%2Fw%3Ard" in rendered
        assert rendered.endswith("@db.example.internal:5432/db")


class TestCreateDbEngine:
    @patch("db_init.boundary.db.connection.create_engine")
    def test_engine_uses_null_pool_and_timeouts(self, mock_create_engine, db_config, credentials):
        create_db_engine(db_config, credentials)

        kwargs = mock_create_engine.call_args.kwargs
        assert kwargs["poolclass"] is NullPool
        assert kwargs["connect_args"] == {"connect_timeout": 10, "sslmode": "prefer"}
        assert kwargs["echo"] is False


class TestOpenConnection:
    def test_yields_working_connection(self, db_config, credentials):
        engine = create_engine("sqlite://", poolclass=NullPool)
        with patch("db_init.boundary.db.connection.create_db_engine", return_value=engine):
            with open_connection(db_config, credentials) as connection:
                assert connection.execute(text("SELECT 1")).scalar_one() == 1

            assert connection.closed

    def test_connection_released_when_body_raises(self, db_config, credentials):
        engine = MagicMock()
        connection = engine.connect.return_value

        with patch("db_init.boundary.db.connection.create_db_engine", return_value=engine):
            with pytest.raises(RuntimeError):
                with open_connection(db_config, credentials):
                    raise RuntimeError("boom")

        connection.close.assert_called_once()
        engine.dispose.assert_called_once()

    def test_connect_failure_raises_connection_error(self, db_config, credentials):
        engine = MagicMock()
        engine.connect.side_effect = OperationalError(
            "connect", {}, Exception("could not translate host name")
        )

        with patch("db_init.boundary.db.connection.create_db_engine", return_value=engine):
            with pytest.raises(DatabaseConnectionError) as exc_info:
                with open_connection(db_config, credentials):
                    pytest.fail("body must not run when connect fails")

        assert exc_info.value.details["host"] == "db.example.internal"
        assert isinstance(exc_info.value.__cause__, OperationalError)
        engine.dispose.assert_called_once()

    def test_connect_failure_does_not_leak_password(self, db_config, credentials):
        engine = MagicMock()
        engine.connect.side_effect = OperationalError("connect", {}, Exception("auth failed"))

        with patch("db_init.boundary.db.connection.create_db_engine", return_value=engine):
            with pytest.raises(DatabaseConnectionError) as exc_info:
                with open_connection(db_config, credentials):
                    pass

        assert credentials.password not in str(exc_info.value)
