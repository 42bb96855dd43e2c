"""Configuration models for crckit.

This module provides the frozen Pydantic configuration classes describing
one checksum or CRC variant each.
"""

from __future__ import annotations

from .base import MAX_BITS, BaseConfig
from .configs import ChecksumConfig, Config, CrcConfig, parse_config

__all__ = [
    "MAX_BITS",
    "BaseConfig",
    "ChecksumConfig",
    "CrcConfig",
    "Config",
    "parse_config",
]
