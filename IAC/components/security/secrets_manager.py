"""
Secrets Manager lookup for database credentials.

The credentials secret is created and rotated outside this stack. It must
hold a JSON object:

    {"username": "...", "password": "...", "dbname": "..."}

The stack reads it twice:
- at deploy time, for the RDS master username/password
- at run time, from the initializer Lambda (by name, via DB_SECRET_NAME)
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws


@dataclass
class SecretsOutputs:
    """Output values from secrets lookup."""
    secret_name: str
    secret_arn: pulumi.Output[str]
    username: pulumi.Output[str]
    password: pulumi.Output[str]


class SecretsManagerComponent(pulumi.ComponentResource):
    """
    Reference to an existing database credentials secret.

    Creates no AWS resources; only resolves the secret ARN and its
    current value.
    """

    def __init__(
        self,
        name: str,
        secret_name: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:SecretsManager", name, None, opts)

        invoke_opts = pulumi.InvokeOptions(parent=self)

        self.secret_name = secret_name
        self.db_secret = aws.secretsmanager.get_secret_output(
            name=secret_name,
            opts=invoke_opts,
        )
        secret_version = aws.secretsmanager.get_secret_version_output(
            secret_id=self.db_secret.arn,
            opts=invoke_opts,
        )
        credentials = secret_version.secret_string.apply(json.loads)

        self.username = pulumi.Output.secret(credentials.apply(lambda c: c["username"]))
        self.password = pulumi.Output.secret(credentials.apply(lambda c: c["password"]))

        self.register_outputs({
            "db_secret_arn": self.db_secret.arn,
        })

    def get_outputs(self) -> SecretsOutputs:
        """Get secret output values."""
        return SecretsOutputs(
            secret_name=self.secret_name,
            secret_arn=self.db_secret.arn,
            username=self.username,
            password=self.password,
        )
