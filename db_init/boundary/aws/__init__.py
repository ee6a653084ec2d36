from db_init.boundary.aws.secrets_client import get_secrets_client, resolve_db_credentials

__all__ = ["get_secrets_client", "resolve_db_credentials"]
