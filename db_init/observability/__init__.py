"""
Observability module.

Provides stdout logging configuration for the Lambda runtime.
"""

from db_init.observability.logger import configure_logging

__all__ = ["configure_logging"]
