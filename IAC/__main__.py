"""
Pulumi program entry point for the PostgreSQL seed stack.

Instantiates all component resources in dependency order:
1. Configuration
2. VPC → Security Group
3. Credentials secret lookup → IAM Role
4. RDS PostgreSQL
5. Initializer Lambda (invoked once the database exists)
"""

import pulumi

from IAC.configs.environment import get_config
from IAC.configs.constants import PROJECT_NAME
from IAC.utils.naming import ResourceNamer

# Networking
from IAC.components.networking.vpc import VpcComponent
from IAC.components.networking.security_groups import SecurityGroupsComponent

# Security
from IAC.components.security.iam_roles import IamRolesComponent
from IAC.components.security.secrets_manager import SecretsManagerComponent

# Storage
from IAC.components.storage.rds_postgres import RdsPostgresComponent

# Compute
from IAC.components.compute.lambda_initializer import LambdaInitializerComponent


def main() -> None:
    """Deploy the PostgreSQL seed stack."""
    config = get_config()
    namer = ResourceNamer(project=PROJECT_NAME, environment=config.environment)
    base_name = namer.prefix

    # --- Layer 1: Networking Foundation ---
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: Credentials and IAM ---
    secrets = SecretsManagerComponent(
        name=base_name,
        secret_name=config.db_secret_name,
    )
    secret_outputs = secrets.get_outputs()

    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
        db_secret_arn=secret_outputs.secret_arn,
    )
    iam_outputs = iam_roles.get_outputs()

    # --- Layer 3: Database ---
    rds = RdsPostgresComponent(
        name=base_name,
        environment=config.environment,
        config=config,
        subnet_ids=vpc_outputs.private_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        master_username=secret_outputs.username,
        master_password=secret_outputs.password,
    )
    rds_outputs = rds.get_outputs()

    # --- Layer 4: Initializer ---
    # The secret's dbname must match config.database_name for the seed to
    # land in the database created here.
    initializer = LambdaInitializerComponent(
        name=namer.name("db-init"),
        environment=config.environment,
        config=config,
        role_arn=iam_outputs.lambda_role_arn,
        subnet_ids=vpc_outputs.private_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        db_host=rds_outputs.address,
        db_secret_name=secret_outputs.secret_name,
        depends_on=[rds.instance, iam_roles.lambda_policy],
    )
    lambda_outputs = initializer.get_outputs()

    # --- Exports ---
    outputs = {
        "vpc_id": vpc_outputs.vpc_id,
        "security_group_id": sg_outputs.database_sg_id,
        "db_endpoint": rds_outputs.endpoint,
        "db_address": rds_outputs.address,
        "init_function_name": lambda_outputs.function_name,
        "init_result": lambda_outputs.invocation_result,
    }

    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
