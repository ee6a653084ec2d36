"""
Boundary layer for external system integrations.

Handles all interactions with external systems (Secrets Manager, PostgreSQL).
"""
