"""
Lambda handler for one-shot database initialization.

Invoked once after the RDS instance is created (custom resource or direct
invocation). Sequence, no retries:
resolve secret → connect → create table if missing → insert seed rows →
close connection → report SUCCESS/FAILED.

Environment variables:
- DB_SECRET_NAME: Secrets Manager name of {username, password, dbname} (required)
- DB_HOST: RDS endpoint address (required)
- DB_PORT: PostgreSQL port (default 5432)
- SEED_SKIP_EXISTING: Skip seed rows already present (default false)
- LOG_LEVEL: Logging level

Dependencies: db_init.configs, db_init.boundary, db_init.core
System role: Lambda entry point for schema and seed initialization
"""

import json
import logging
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from db_init.boundary.aws.secrets_client import resolve_db_credentials
from db_init.boundary.db.connection import open_connection
from db_init.configs import Settings, get_settings
from db_init.core.exceptions import ConfigurationError, SeederError
from db_init.core.reporter import ReportStatus, send_response
from db_init.core.seeder import EmployeeSeeder
from db_init.observability.logger import configure_logging

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Database initialized successfully!"
FAILURE_MESSAGE = "Error initializing database"


def validate_environment(settings: Settings) -> None:
    """
    Check required environment values before any network call.

    Raises:
        ConfigurationError: DB_SECRET_NAME or DB_HOST not set
    """
    if not settings.database.secret_name:
        raise ConfigurationError(
            "DB_SECRET_NAME environment variable is not set",
            variable="DB_SECRET_NAME",
        )
    if not settings.database.host:
        raise ConfigurationError(
            "DB_HOST environment variable is not set",
            variable="DB_HOST",
        )
    logger.info("validate_environment - Environment validated")


def initialize_database(settings: Settings) -> int:
    """
    Run the schema and seed steps.

    Args:
        settings: Seeder settings

    Returns:
        int: Number of seed rows inserted

    Raises:
        SeederError: Any step failed (connection already released)
    """
    validate_environment(settings)
    credentials = resolve_db_credentials(settings.database.secret_name)

    with open_connection(settings.database, credentials) as connection:
        seeder = EmployeeSeeder(connection)
        seeder.ensure_schema()
        return seeder.insert_seed_records(skip_existing=settings.seed.skip_existing)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for database initialization requests.

    Every failure is caught, logged and reported as FAILED; nothing is
    re-raised to the Lambda runtime.

    Args:
        event: Custom resource event (RequestType, ResponseURL, ...) or any
            direct invocation payload
        context: Lambda context object

    Returns:
        Dict: Response document with Status and Data {statusCode, body}
    """
    if not isinstance(event, dict):
        # Direct invokes may send null, a string or a list; run as Create
        logger.warning("handler - Non-object payload of type %s", type(event).__name__)
        event = {}

    logger.info("handler - Received event: %s", json.dumps(_redact(event), default=str))

    request_type = event.get("RequestType", "Create")
    if request_type == "Delete":
        # Table and rows are left in place; nothing to undo
        logger.info("handler - Delete request, skipping initialization")
        return send_response(
            event,
            context,
            ReportStatus.SUCCESS,
            {"statusCode": 200, "body": json.dumps("Nothing to delete")},
        )

    try:
        settings = get_settings()
        inserted = initialize_database(settings)
    except SeederError as e:
        logger.error(
            "handler - %s: %s",
            type(e).__name__,
            e,
            extra={"request_type": request_type},
        )
        return _report_failure(event, context)
    except Exception as e:  # pylint: disable=broad-except
        logger.exception("handler - Unexpected %s: %s", type(e).__name__, e)
        return _report_failure(event, context)

    logger.info(
        "handler - Database initialized",
        extra={
            "request_type": request_type,
            "inserted": inserted,
            "environment": settings.environment,
        },
    )
    return send_response(
        event,
        context,
        ReportStatus.SUCCESS,
        {"statusCode": 200, "body": json.dumps(SUCCESS_MESSAGE)},
    )


def _report_failure(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return send_response(
        event,
        context,
        ReportStatus.FAILED,
        {"statusCode": 500, "body": json.dumps(FAILURE_MESSAGE)},
    )


def _redact(event: Dict[str, Any]) -> Dict[str, Any]:
    """Hide the pre-signed ResponseURL from logs."""
    if "ResponseURL" not in event:
        return event
    return {**event, "ResponseURL": "<redacted>"}
