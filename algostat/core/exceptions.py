"""
Exception hierarchy for AlgoStat.

All exceptions inherit from AlgoStatError to allow catching any
library-specific error.

Design principles:
    - Validation errors are raised before any computation starts
    - Error messages are actionable with actual vs expected values
    - Numerical failures inside a test do NOT raise; they mark the
      result invalid (see Result.warnings and the `valid` flag)
"""


class AlgoStatError(Exception):
    """Base exception for all AlgoStat errors."""
    pass


class ValidationError(AlgoStatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: samples
    that are too small, mismatched paired lengths, too few groups,
    non-finite values, or unknown method / test-type names.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a sample is not 1-dimensional or when paired samples
    (or labels and values) have inconsistent lengths.
    """
    pass

