"""
Utility functions for Pulumi infrastructure.

Provides naming conventions and tag factories.
"""

from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags

__all__ = [
    "ResourceNamer",
    "create_tags",
]
