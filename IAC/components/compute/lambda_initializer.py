"""
Lambda initializer component for database schema and seed data.

Creates:
- CloudWatch log group for function logs
- Lambda function in the VPC (private subnets) for RDS access
- One-shot invocation after the RDS instance exists

The invocation runs on create, and again whenever a trigger value (the DB
endpoint) changes. The handler always returns its response document; a
FAILED status is raised as a pulumi.RunError so `pulumi up` fails instead of
reporting an unseeded database as deployed.
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags
from IAC.configs.base import StackConfig
from IAC.configs.constants import LAMBDA_DEFAULTS


def check_initializer_result(result: str) -> str:
    """
    Fail the deployment when the initializer reported FAILED.

    Args:
        result: JSON response document returned by the handler

    Returns:
        str: The unchanged document when Status is SUCCESS

    Raises:
        pulumi.RunError: Status is not SUCCESS or the document is unreadable
    """
    try:
        document = json.loads(result)
    except (TypeError, json.JSONDecodeError) as e:
        raise pulumi.RunError(f"Database initializer returned no readable result: {e}") from e

    if not isinstance(document, dict):
        raise pulumi.RunError("Database initializer result is not a JSON object")

    if document.get("Status") != "SUCCESS":
        raise pulumi.RunError(
            f"Database initialization {document.get('Status')}: "
            f"{document.get('Data')} ({document.get('Reason')})"
        )
    return result


@dataclass
class LambdaOutputs:
    """Output values from Lambda component."""
    function_arn: pulumi.Output[str]
    function_name: pulumi.Output[str]
    invocation_result: pulumi.Output[str]


class LambdaInitializerComponent(pulumi.ComponentResource):
    """
    Lambda function that creates and seeds the Employee table.

    Invoked once with {"RequestType": "Create"}.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        role_arn: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        db_host: pulumi.Input[str],
        db_secret_name: str,
        depends_on: list[pulumi.Resource] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:LambdaInitializer", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # CloudWatch Log Group
        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=f"/aws/lambda/{name}",
            retention_in_days=30,
            tags=create_tags(environment, f"{name}-logs"),
            opts=child_opts,
        )

        # Lambda Function (zip built by db_init/scripts/package_lambda.py)
        self.function = aws.lambda_.Function(
            f"{name}-function",
            name=name,
            role=role_arn,
            runtime=str(LAMBDA_DEFAULTS["runtime"]),
            handler=str(LAMBDA_DEFAULTS["handler"]),
            code=pulumi.FileArchive(config.lambda_artifact),
            memory_size=config.lambda_memory,
            timeout=config.lambda_timeout,
            vpc_config=aws.lambda_.FunctionVpcConfigArgs(
                subnet_ids=subnet_ids,
                security_group_ids=[security_group_id],
            ),
            environment=aws.lambda_.FunctionEnvironmentArgs(
                variables={
                    "ENVIRONMENT": environment,
                    "DB_HOST": db_host,
                    "DB_SECRET_NAME": db_secret_name,
                    "LOG_LEVEL": "INFO",
                },
            ),
            tags=create_tags(environment, f"{name}-function"),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.log_group],
            ),
        )

        # Run once the database is available
        self.invocation = aws.lambda_.Invocation(
            f"{name}-invocation",
            function_name=self.function.name,
            input=json.dumps({"RequestType": "Create"}),
            triggers={"db_host": db_host},
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.function, *(depends_on or [])],
            ),
        )

        self.result = self.invocation.result.apply(check_initializer_result)

        self.register_outputs({
            "function_arn": self.function.arn,
            "function_name": self.function.name,
            "invocation_result": self.result,
        })

    def get_outputs(self) -> LambdaOutputs:
        """Get Lambda output values."""
        return LambdaOutputs(
            function_arn=self.function.arn,
            function_name=self.function.name,
            invocation_result=self.result,
        )
