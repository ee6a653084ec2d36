"""
Pulumi infrastructure-as-code for the employee PostgreSQL seed stack.

This package defines AWS infrastructure including:
- VPC across two availability zones with a NAT gateway
- Security group for PostgreSQL access
- RDS PostgreSQL using credentials from an existing secret
- Lambda that creates and seeds the Employee table, invoked once
"""
