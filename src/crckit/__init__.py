"""crckit: Parameterized Checksum and CRC Calculator

A Python library for checksums and CRCs of any width up to 64 bits, under the
Rocksoft/Williams parameterized model: polynomial, initial value, final XOR,
input bit reflection, output bit reflection and output byte reflection.

Key Features:
- Pydantic-based, immutable configuration objects
- Bitwise reference algorithm and table-driven algorithm with identical results
- Incremental, resumable calculation from any previously returned value
- Catalog of common standards (CRC-16, Modbus, CCITT variants, DNP, CRC-32, checksums)

Quick Start:
    >>> from crckit import CRC_32, Calculator, calculate, update
    >>> hex(calculate(CRC_32, b"123456789"))
    '0xcbf43926'
    >>> calc = Calculator(CRC_32)
    >>> value = None
    >>> for byte in b"123456789":
    ...     value = calc.update(value, byte)
    >>> hex(value)
    '0xcbf43926'
"""

from __future__ import annotations

import logging

from .calculator import Calculator, calculate, update
from .catalog import (
    CATALOG,
    CHECKSUM_8,
    CHECKSUM_16,
    CHECKSUM_32,
    CRC_16,
    CRC_16_MODBUS,
    CRC_32,
    CRC_CCITT,
    CRC_CCITT_1D0F,
    CRC_CCITT_KERMIT,
    CRC_CCITT_XMODEM,
    CRC_DNP,
    get_config,
)
from .exceptions import ConfigurationError, CrcKitError, UnsupportedConfigurationError
from .models import BaseConfig, ChecksumConfig, Config, CrcConfig, parse_config
from .utils import digest_size, to_bytes, verify

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "calculate",
    "update",
    "Calculator",
    # Configuration
    "BaseConfig",
    "ChecksumConfig",
    "CrcConfig",
    "Config",
    "parse_config",
    # Catalog
    "CATALOG",
    "get_config",
    "CHECKSUM_8",
    "CHECKSUM_16",
    "CHECKSUM_32",
    "CRC_16",
    "CRC_16_MODBUS",
    "CRC_CCITT",
    "CRC_CCITT_XMODEM",
    "CRC_CCITT_1D0F",
    "CRC_CCITT_KERMIT",
    "CRC_DNP",
    "CRC_32",
    # Exceptions
    "CrcKitError",
    "ConfigurationError",
    "UnsupportedConfigurationError",
    # Utilities
    "digest_size",
    "to_bytes",
    "verify",
    # Version
    "__version__",
]
