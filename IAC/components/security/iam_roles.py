"""
IAM roles component for the initializer Lambda.

Creates:
- Lambda execution role with CloudWatch Logs and VPC networking access
- Inline read access to the database credentials secret only
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    lambda_role_arn: pulumi.Output[str]


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM role for the database initializer Lambda.

    Follows least-privilege principle with specific resource permissions.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        db_secret_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Lambda assume role policy
        lambda_assume_policy = json.dumps({
            "Version": "2012-10-17",
            "Statement": [{
                "Effect": "Allow",
                "Principal": {"Service": "lambda.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }],
        })

        # Lambda Role
        self.lambda_role = aws.iam.Role(
            f"{name}-lambda-role",
            assume_role_policy=lambda_assume_policy,
            tags=create_tags(environment, f"{name}-lambda-role"),
            opts=child_opts,
        )

        # Attach AWS managed policies for Lambda
        aws.iam.RolePolicyAttachment(
            f"{name}-lambda-basic-execution",
            role=self.lambda_role.name,
            policy_arn="arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole",
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-lambda-vpc-access",
            role=self.lambda_role.name,
            policy_arn="arn:aws:iam::aws:policy/service-role/AWSLambdaVPCAccessExecutionRole",
            opts=child_opts,
        )

        # Lambda custom policy - read the credentials secret
        self.lambda_policy = aws.iam.RolePolicy(
            f"{name}-lambda-secret-read",
            role=self.lambda_role.id,
            policy=pulumi.Output.from_input(db_secret_arn).apply(
                lambda arn: json.dumps({
                    "Version": "2012-10-17",
                    "Statement": [
                        {
                            "Effect": "Allow",
                            "Action": [
                                "secretsmanager:GetSecretValue",
                                "secretsmanager:DescribeSecret",
                            ],
                            "Resource": [arn],
                        },
                    ],
                })
            ),
            opts=child_opts,
        )

        self.register_outputs({
            "lambda_role_arn": self.lambda_role.arn,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            lambda_role_arn=self.lambda_role.arn,
        )
