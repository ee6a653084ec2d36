"""
Security Group Component for PostgreSQL access.

One group shared by the RDS instance and the initializer Lambda:
- Ingress: PostgreSQL (5432) from any IPv4 address.
- Egress: all traffic (Lambda needs Secrets Manager through the NAT).

The instance itself is not publicly accessible and lives in private subnets,
so the open ingress rule only admits traffic that can already route into
the VPC.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import PORTS
from IAC.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security group component."""
    database_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security group allowing PostgreSQL access.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="Allow postgres access",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-database-sg"),
            opts=child_opts,
        )

        self._create_rules(name, child_opts)

        self.register_outputs({
            "database_sg_id": self.database_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-postgres",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["postgres"],
            to_port=PORTS["postgres"],
            cidr_ipv4="0.0.0.0/0",
            description="Allow PostgreSQL access",
            opts=opts,
        )

        aws.vpc.SecurityGroupEgressRule(
            f"{name}-database-egress-all",
            security_group_id=self.database_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            database_sg_id=self.database_sg.id,
        )
