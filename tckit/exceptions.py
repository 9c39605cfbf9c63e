"""
tckit.exceptions - Custom exception classes.

All tckit-specific exceptions inherit from TckitError. Validation findings
are reported as data by tckit.validation and never raised.
"""


class TckitError(Exception):
    """Base exception for all tckit errors."""

    pass


class ParameterError(TckitError, ValueError):
    """A required parameter is missing or unusable."""

    pass


class ConfigError(TckitError):
    """Configuration loading or validation error."""

    pass
