"""
RDS PostgreSQL Component for the seeded database.

Instance:
- Engine version from stack config (POSTGRESFULLVERSION), parameter group
  family from the major version.
- db.t3.micro, single AZ, 20 GB gp2, PostgreSQL logs exported to CloudWatch.
- Private subnets only, not publicly accessible.
- Master credentials taken from the existing Secrets Manager secret.
- No deletion protection; no final snapshot outside prod.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags
from IAC.configs.base import StackConfig
from IAC.configs.constants import RDS_DEFAULTS


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    endpoint: pulumi.Output[str]
    address: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]


class RdsPostgresComponent(pulumi.ComponentResource):
    """
    RDS PostgreSQL database holding the Employee table.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        master_username: pulumi.Input[str],
        master_password: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsPostgres", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.database_name = config.database_name

        # DB Subnet Group
        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        # Parameter Group
        self.parameter_group = aws.rds.ParameterGroup(
            f"{name}-params",
            family=config.parameter_group_family,
            parameters=[
                aws.rds.ParameterGroupParameterArgs(
                    name="log_min_duration_statement",
                    value="1000",  # Log queries > 1 second
                ),
            ],
            tags=create_tags(environment, f"{name}-params"),
            opts=child_opts,
        )

        # RDS Instance
        self.instance = aws.rds.Instance(
            f"{name}-postgres",
            identifier=f"{name}-postgres",
            engine="postgres",
            engine_version=config.postgres_full_version,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_type=str(RDS_DEFAULTS["storage_type"]),
            db_name=config.database_name,
            username=master_username,
            password=master_password,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            parameter_group_name=self.parameter_group.name,
            enabled_cloudwatch_logs_exports=["postgresql"],
            publicly_accessible=False,
            multi_az=False,
            deletion_protection=False,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=f"{name}-final-snapshot" if config.is_production else None,
            tags=create_tags(environment, f"{name}-postgres"),
            opts=child_opts,
        )

        self.register_outputs({
            "endpoint": self.instance.endpoint,
            "address": self.instance.address,
            "port": self.instance.port,
            "database_name": config.database_name,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            endpoint=self.instance.endpoint,
            address=self.instance.address,
            port=self.instance.port,
            database_name=pulumi.Output.from_input(self.database_name),
        )
