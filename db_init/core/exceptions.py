"""
Exception hierarchy for the database seeder.

Every failure raised during an invocation derives from SeederError so the
Lambda handler can translate it into a single FAILED report.

Dependencies: None (pure domain layer)
System role: Centralized exception handling for the seeder
"""

from typing import Any


class SeederError(Exception):
    """Base exception for all seeder errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(SeederError):
    """Raised when a required environment value is absent."""

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            variable: Environment variable that is missing
            details: Additional context
        """
        details = details or {}
        if variable:
            details["variable"] = variable
        super().__init__(message, details)


class SecretResolutionError(SeederError):
    """Raised when the credentials secret cannot be fetched, is empty or malformed."""

    def __init__(
        self,
        message: str,
        secret_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if secret_name:
            details["secret_name"] = secret_name
        super().__init__(message, details)


class DatabaseConnectionError(SeederError):
    """Raised when the database connection cannot be opened (network or auth)."""

    def __init__(
        self,
        message: str,
        host: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if host:
            details["host"] = host
        super().__init__(message, details)


class QueryError(SeederError):
    """Raised when the schema or seed statement fails to execute."""

    def __init__(
        self,
        message: str,
        statement: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if statement:
            details["statement"] = statement
        super().__init__(message, details)
