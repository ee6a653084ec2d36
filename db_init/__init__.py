"""
Database initialization Lambda for the employee seed stack.

This package contains the one-shot initializer invoked after the RDS
PostgreSQL instance is created:
- Resolves database credentials from Secrets Manager
- Ensures the Employee table exists
- Inserts the fixed seed rows
- Reports SUCCESS/FAILED back to the invoking orchestrator
"""
