"""
Compute components.

Components:
- LambdaInitializerComponent: Lambda function that creates and seeds the Employee table
"""

from IAC.components.compute.lambda_initializer import LambdaInitializerComponent, LambdaOutputs

__all__ = [
    "LambdaInitializerComponent",
    "LambdaOutputs",
]
