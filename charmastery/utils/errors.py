"""Custom exceptions for configuration handling."""


class ConfigurationError(Exception):
    """Base exception for configuration errors."""

    pass


class InvalidThresholdError(ConfigurationError):
    """Raised when mastery or ranking thresholds are inconsistent."""

    pass


class InvalidRangeError(ConfigurationError):
    """Raised when a Unicode range is malformed."""

    pass
