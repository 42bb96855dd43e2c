"""Exception hierarchy for crckit.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CrcKitError for easy catching of any crckit-specific error.
"""

from __future__ import annotations


class CrcKitError(Exception):
    """Base exception for all crckit errors."""

    pass


class ConfigurationError(CrcKitError):
    """Raised when a checksum or CRC configuration is invalid.

    Examples:
        - Width outside 1-64 bits
        - Polynomial, initial value or final XOR value wider than the width
        - Output byte reflection on a width that is not a whole number of bytes
        - Unknown catalog name
    """

    pass


class UnsupportedConfigurationError(ConfigurationError):
    """Raised when no engine exists for a configuration kind.

    Surfaced when a configuration is bound to an engine, never deferred
    to the first computation.
    """

    pass
