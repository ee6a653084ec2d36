"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def prefix(self) -> str:
        """Shared prefix used as the base name of every component."""
        return f"{self.project}-{self.environment}"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'db-init')

        Returns:
            Formatted resource name
        """
        return f"{self.prefix}-{resource}"
