"""
Security components for IAM and secrets management.

Components:
- IamRolesComponent: Execution role for the initializer Lambda
- SecretsManagerComponent: Lookup of the existing database credentials secret
"""

from IAC.components.security.iam_roles import IamRolesComponent, IamRoleOutputs
from IAC.components.security.secrets_manager import SecretsManagerComponent, SecretsOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "SecretsManagerComponent",
    "SecretsOutputs",
]
