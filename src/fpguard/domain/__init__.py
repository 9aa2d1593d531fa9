"""
Domain value types для fpguard.
"""

from .non_nan_float import FloatInvariantViolation, NonNaNFloat

__all__ = [
    "FloatInvariantViolation",
    "NonNaNFloat",
]
