"""
Exception hierarchy of the maxvalues package.
"""


class MaxValuesError(Exception):
    """Base class of all package-specific errors."""


class CapacityError(MaxValuesError, ValueError):
    """Raised for a tracker capacity that is not a non-negative integer."""


class IncomparableValueError(MaxValuesError, TypeError):
    """
    Raised at the push call site if the candidate value cannot be ordered
    against the values already held. The tracker is left untouched.
    """


class ConfigurationError(MaxValuesError, ValueError):
    """Raised for invalid or inconsistent configuration data."""


class InputError(MaxValuesError, ValueError):
    """Raised for input tokens that cannot be converted to the configured type."""
