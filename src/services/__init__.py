"""
Utility functions for Lambda handler operations.

This package contains reusable service functions for roster parsing
and S3 interactions.
"""

__all__ = ['roster', 's3']
