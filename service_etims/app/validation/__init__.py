"""
Request validation for forwarded eTIMS operations.
"""

from .schemas import SCHEMAS, validate

__all__ = ["SCHEMAS", "validate"]
