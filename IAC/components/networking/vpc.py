"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (10.0.0.0/16) spanning two availability zones.
2. Internet Gateway: the exit for the NAT gateway.
3. Subnets (one of each per AZ):
   - Public (10.0.0.0/24, 10.0.1.0/24): NAT gateway.
   - Private (10.0.2.0/24, 10.0.3.0/24): RDS instance and the initializer Lambda.
4. NAT Gateway: a single gateway in the first public subnet. The Lambda needs
   it to reach the Secrets Manager API from a private subnet.
5. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Private RT: 0.0.0.0/0 -> NAT. Traffic to RDS uses the implicit local route.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import VPC_CIDR, SUBNET_CIDRS, MAX_AZS
from IAC.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    private_subnet_ids: list[pulumi.Output[str]]
    nat_gateway_id: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public/private subnets in two AZs and a NAT gateway.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        zones = aws.get_availability_zones(state="available").names[:MAX_AZS]

        # Create VPC
        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=VPC_CIDR,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        # Create Internet Gateway (for NAT Gateway)
        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets: list[aws.ec2.Subnet] = []
        self.private_subnets: list[aws.ec2.Subnet] = []
        for index, zone in enumerate(zones):
            suffix = chr(ord("a") + index)
            self.public_subnets.append(aws.ec2.Subnet(
                f"{name}-public-subnet-{suffix}",
                vpc_id=self.vpc.id,
                cidr_block=SUBNET_CIDRS["public"][index],
                availability_zone=zone,
                map_public_ip_on_launch=True,
                tags=create_tags(environment, f"{name}-public-subnet-{suffix}"),
                opts=child_opts,
            ))
            self.private_subnets.append(aws.ec2.Subnet(
                f"{name}-private-subnet-{suffix}",
                vpc_id=self.vpc.id,
                cidr_block=SUBNET_CIDRS["private"][index],
                availability_zone=zone,
                tags=create_tags(environment, f"{name}-private-subnet-{suffix}"),
                opts=child_opts,
            ))

        # NAT Gateway in the first public subnet
        self.nat_eip = aws.ec2.Eip(
            f"{name}-nat-eip",
            domain="vpc",
            tags=create_tags(environment, f"{name}-nat-eip"),
            opts=pulumi.ResourceOptions(parent=self, depends_on=[self.igw]),
        )
        self.nat_gateway = aws.ec2.NatGateway(
            f"{name}-nat",
            allocation_id=self.nat_eip.id,
            subnet_id=self.public_subnets[0].id,
            tags=create_tags(environment, f"{name}-nat"),
            opts=child_opts,
        )

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_ids": [s.id for s in self.public_subnets],
            "private_subnet_ids": [s.id for s in self.private_subnets],
            "nat_gateway_id": self.nat_gateway.id,
        })

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and private subnets."""
        # Public route table (Internet Gateway)
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        # Private route table (outbound through NAT only)
        self.private_rt = aws.ec2.RouteTable(
            f"{name}-private-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    nat_gateway_id=self.nat_gateway.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-private-rt"),
            opts=opts,
        )

        for index, subnet in enumerate(self.public_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=public_rt.id,
                opts=opts,
            )

        for index, subnet in enumerate(self.private_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-private-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.private_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_ids=[s.id for s in self.public_subnets],
            private_subnet_ids=[s.id for s in self.private_subnets],
            nat_gateway_id=self.nat_gateway.id,
        )
