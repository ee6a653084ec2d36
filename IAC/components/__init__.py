"""
Pulumi component resources for the PostgreSQL seed stack.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, NAT gateway, security group
- security: IAM role, credentials secret lookup
- storage: RDS PostgreSQL
- compute: database initializer Lambda
"""
