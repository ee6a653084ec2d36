"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite engines standing in for PostgreSQL, environment isolation,
Lambda context stub, credentials
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.pool import StaticPool

from db_init.boundary.db.models.employee_model import EmployeeModel
from db_init.configs.settings import get_settings
from db_init.models.seed_record import DatabaseCredentials

ENV_VARS = (
    "DB_SECRET_NAME",
    "DB_HOST",
    "DB_PORT",
    "DB_CONNECT_TIMEOUT",
    "DB_SSLMODE",
    "DB_ECHO_SQL",
    "SEED_SKIP_EXISTING",
    "ENVIRONMENT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test without seeder env vars and with a fresh settings cache."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def seeder_env(monkeypatch):
    """Set the required seeder environment."""
    monkeypatch.setenv("DB_SECRET_NAME", "db_secret")
    monkeypatch.setenv("DB_HOST", "db.example.internal")
    get_settings.cache_clear()


@pytest.fixture
def sqlite_engine():
    """
    In-memory SQLite engine shared across connections.

    Yields:
        Engine: Engine whose connections all see the same database
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_file_url(tmp_path):
    """File-backed SQLite URL that survives engine disposal between invocations."""
    return f"sqlite:///{tmp_path / 'seed.db'}"


@pytest.fixture
def credentials():
    """Resolved database credentials."""
    return DatabaseCredentials(username="postgres", password="s3cr3t", dbname="MyDatabase")


@pytest.fixture
def lambda_context():
    """Minimal Lambda context."""
    return SimpleNamespace(
        log_stream_name="2026/10/19/[$LATEST]abcdef",
        function_name="employee-db-seeder-dev-db-init",
        aws_request_id="req-123",
    )


@pytest.fixture
def custom_resource_event():
    """CloudFormation-style Create event."""
    return {
        "RequestType": "Create",
        "ResponseURL": "https://cfn-response.s3.amazonaws.com/presigned",
        "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/seed/abc",
        "RequestId": "unique-request-id",
        "LogicalResourceId": "InitDbResource",
        "ResourceType": "AWS::CloudFormation::CustomResource",
    }


@pytest.fixture
def employee_rows():
    """Return a reader for all employee rows as tuples, ordered by id."""
    table = EmployeeModel.__table__

    def _read(connection):
        result = connection.execute(
            select(
                table.c.firstname,
                table.c.lastname,
                table.c.zip,
                table.c.country,
                table.c.salary,
            ).order_by(table.c.id)
        )
        return [tuple(row) for row in result]

    return _read


@pytest.fixture
def employee_count():
    """Return a counter for employee rows."""
    table = EmployeeModel.__table__

    def _count(connection):
        return connection.execute(select(func.count()).select_from(table)).scalar_one()

    return _count
