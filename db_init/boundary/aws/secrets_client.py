"""
Secrets Manager client for database credentials.

The boto3 client is created once per process (Lambda container) and reused
read-only by every invocation.

Dependencies: boto3, pydantic
System role: Resolves the credentials secret reference to DatabaseCredentials
"""

import json
import logging
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from db_init.core.exceptions import SecretResolutionError
from db_init.models.seed_record import DatabaseCredentials

logger = logging.getLogger(__name__)


@lru_cache
def get_secrets_client():
    """Process-wide Secrets Manager client."""
    return boto3.client("secretsmanager")


def resolve_db_credentials(secret_name: str) -> DatabaseCredentials:
    """
    Fetch and parse the database credentials secret.

    Args:
        secret_name: Secrets Manager name or ARN

    Returns:
        DatabaseCredentials: username, password and dbname

    Raises:
        SecretResolutionError: Fetch failed, SecretString empty, invalid JSON
            or required fields missing
    """
    try:
        response = get_secrets_client().get_secret_value(SecretId=secret_name)
    except (ClientError, BotoCoreError) as e:
        logger.error("resolve_db_credentials - %s: %s", type(e).__name__, e)
        raise SecretResolutionError(
            f"Failed to fetch secret: {e}", secret_name=secret_name
        ) from e

    secret_string = response.get("SecretString")
    if not secret_string:
        raise SecretResolutionError("SecretString is empty", secret_name=secret_name)

    try:
        payload = json.loads(secret_string)
    except json.JSONDecodeError as e:
        logger.error("resolve_db_credentials - JSONDecodeError: %s", e)
        raise SecretResolutionError(
            f"Secret is not valid JSON: {e.msg}", secret_name=secret_name
        ) from e

    if not isinstance(payload, dict):
        raise SecretResolutionError("Secret JSON is not an object", secret_name=secret_name)

    try:
        credentials = DatabaseCredentials.model_validate(payload)
    except ValidationError as e:
        # Field names only; never echo secret values
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise SecretResolutionError(
            "Secret is missing required fields",
            secret_name=secret_name,
            details={"fields": fields},
        ) from e

    logger.info(
        "resolve_db_credentials - Resolved database credentials",
        extra={"secret_name": secret_name, "dbname": credentials.dbname},
    )
    return credentials
