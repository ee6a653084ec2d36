"""Unit tests for credential resolution from Secrets Manager."""

import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from db_init.boundary.aws.secrets_client import get_secrets_client, resolve_db_credentials
from db_init.core.exceptions import SecretResolutionError

SECRET_NAME = "db_secret"


@pytest.fixture
def mock_client():
    """Secrets Manager client stub returned by get_secrets_client."""
    client = MagicMock()
    with patch(
        "db_init.boundary.aws.secrets_client.get_secrets_client",
        return_value=client,
    ):
        yield client


def _secret(payload):
    return {"Name": SECRET_NAME, "SecretString": payload}


class TestResolveDbCredentials:
    """Parsing and error mapping of the credentials secret."""

    def test_resolves_credentials(self, mock_client):
        mock_client.get_secret_value.return_value = _secret(
            json.dumps({"username": "postgres", "password": "p@ss/word", "dbname": "MyDatabase"})
        )

        credentials = resolve_db_credentials(SECRET_NAME)

        mock_client.get_secret_value.assert_called_once_with(SecretId=SECRET_NAME)
        assert credentials.username == "postgres"
        assert credentials.password == "p@ss/word"
        assert credentials.dbname == "MyDatabase"

    def test_ignores_extra_fields(self, mock_client):
        """RDS-managed secrets carry engine, host and port alongside the credentials."""
        mock_client.get_secret_value.return_value = _secret(
            json.dumps({
                "username": "postgres",
                "password": "pw",
                "dbname": "MyDatabase",
                "engine": "postgres",
                "port": 5432,
            })
        )

        assert resolve_db_credentials(SECRET_NAME).dbname == "MyDatabase"

    def test_password_not_in_repr(self, mock_client):
        mock_client.get_secret_value.return_value = _secret(
            json.dumps({"username": "postgres", "password": "topsecret", "dbname": "db"})
        )

        assert "topsecret" not in repr(resolve_db_credentials(SECRET_NAME))

    def test_client_error_raises(self, mock_client):
        mock_client.get_secret_value.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "not found"}},
            "GetSecretValue",
        )

        with pytest.raises(SecretResolutionError, match="Failed to fetch secret") as exc_info:
            resolve_db_credentials(SECRET_NAME)

        assert exc_info.value.details["secret_name"] == SECRET_NAME
        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_endpoint_error_raises(self, mock_client):
        """Unreachable Secrets Manager endpoint is a resolution failure."""
        mock_client.get_secret_value.side_effect = EndpointConnectionError(
            endpoint_url="https://secretsmanager.us-east-1.amazonaws.com"
        )

        with pytest.raises(SecretResolutionError, match="Failed to fetch secret"):
            resolve_db_credentials(SECRET_NAME)

    @pytest.mark.parametrize("secret_string", [None, ""])
    def test_empty_secret_string_raises(self, mock_client, secret_string):
        mock_client.get_secret_value.return_value = _secret(secret_string)

        with pytest.raises(SecretResolutionError, match="SecretString is empty"):
            resolve_db_credentials(SECRET_NAME)

    def test_invalid_json_raises(self, mock_client):
        mock_client.get_secret_value.return_value = _secret("{not json")

        with pytest.raises(SecretResolutionError, match="not valid JSON"):
            resolve_db_credentials(SECRET_NAME)

    def test_non_object_json_raises(self, mock_client):
        mock_client.get_secret_value.return_value = _secret(json.dumps(["postgres", "pw"]))

        with pytest.raises(SecretResolutionError, match="not an object"):
            resolve_db_credentials(SECRET_NAME)

    def test_missing_fields_listed_without_values(self, mock_client):
        mock_client.get_secret_value.return_value = _secret(
            json.dumps({"username": "postgres", "password": "hunter2"})
        )

        with pytest.raises(SecretResolutionError, match="missing required fields") as exc_info:
            resolve_db_credentials(SECRET_NAME)

        assert exc_info.value.details["fields"] == ["dbname"]
        assert "hunter2" not in str(exc_info.value)

    def test_empty_field_rejected(self, mock_client):
        mock_client.get_secret_value.return_value = _secret(
            json.dumps({"username": "", "password": "pw", "dbname": "db"})
        )

        with pytest.raises(SecretResolutionError) as exc_info:
            resolve_db_credentials(SECRET_NAME)

        assert exc_info.value.details["fields"] == ["username"]


class TestGetSecretsClient:
    """Process-wide client reuse."""

    def test_client_is_created_once(self):
        get_secrets_client.cache_clear()
        try:
            with patch("db_init.boundary.aws.secrets_client.boto3.client") as mock_factory:
                first = get_secrets_client()
                second = get_secrets_client()

            assert first is second
            mock_factory.assert_called_once_with("secretsmanager")
        finally:
            get_secrets_client.cache_clear()
