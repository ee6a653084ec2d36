"""
Tag factory for the seed stack.

Every taggable resource carries Project, ManagedBy, Environment and Name so
the RDS instance, the initializer Lambda and the network pieces can be
found together in the billing and resource-group views.
"""

from IAC.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Build the tag set for one resource.

    Args:
        environment: Stack environment (dev, staging, prod)
        resource_name: Physical name, usually from ResourceNamer
        **extra_tags: Resource-specific tags; these win over the defaults

    Returns:
        dict: Tag map for the resource's `tags` argument
    """
    return {**DEFAULT_TAGS, "Environment": environment, "Name": resource_name, **extra_tags}
