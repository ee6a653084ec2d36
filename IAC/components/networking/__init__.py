"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public/private subnets, NAT gateway, route tables
- SecurityGroupsComponent: PostgreSQL security group
"""

from IAC.components.networking.vpc import VpcComponent, VpcOutputs
from IAC.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
