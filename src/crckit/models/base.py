"""Base configuration class shared by checksum and CRC variants.

This module provides the BaseConfig class that every configuration inherits from.
Configurations are frozen Pydantic models, so they are hashable and can be shared
freely between threads and used as cache keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, model_validator

from ..exceptions import ConfigurationError

MAX_BITS = 64


class BaseConfig(BaseModel):
    """Base class for all checksum/CRC configurations.

    Subclasses add a ``kind`` literal used to tell the variants apart and any
    parameters specific to their algorithm.

    Attributes:
        name: Display name (not used in any computation)
        bits: Number of bits in the final output (1-64)
        initial_value: Starting value of the accumulator

    Derived:
        num_bytes: Whole bytes in the output (``bits // 8``, truncating)
        mask: Bitmask confining every result to ``bits`` width
    """

    model_config = ConfigDict(
        # Immutable once constructed
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    name: str
    # bools are rejected, not coerced to a 1-bit width
    bits: StrictInt
    initial_value: int = 0

    @property
    def num_bytes(self) -> int:
        return self.bits // 8

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @model_validator(mode="after")
    def validate_parameters(self) -> BaseConfig:
        """Reject widths and values the engines cannot represent.

        ConfigurationError is not a ValueError, so Pydantic re-raises it
        as-is instead of wrapping it in a ValidationError.
        """
        if not 1 <= self.bits <= MAX_BITS:
            raise ConfigurationError(f"{self.name}: bits must be 1-{MAX_BITS}, got {self.bits}")
        self.check_parameters()
        return self

    def check_parameters(self) -> None:
        """Check variant parameters once the width is known to be valid."""
        self.check_fits("initial_value", self.initial_value)

    def check_fits(self, field: str, value: int) -> None:
        """Ensure a parameter fits within the configured width.

        Raises:
            ConfigurationError: If value is negative or wider than ``bits``
        """
        if not 0 <= value <= self.mask:
            raise ConfigurationError(
                f"{self.name}: {field} must be 0-{self.mask:#x} for {self.bits}-bit width, "
                f"got {value:#x}"
            )
