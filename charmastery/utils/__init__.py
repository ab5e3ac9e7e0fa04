"""Utility modules for charmastery."""

from .errors import ConfigurationError, InvalidRangeError, InvalidThresholdError

__all__ = [
    "ConfigurationError",
    "InvalidRangeError",
    "InvalidThresholdError",
]
