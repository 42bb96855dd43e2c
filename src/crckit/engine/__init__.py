"""Computation engines for crckit.

This module provides the checksum and CRC engines and ``engine_for``, which
selects the engine matching a configuration's variant.
"""

from __future__ import annotations

import logging

from ..exceptions import UnsupportedConfigurationError
from ..models import BaseConfig, ChecksumConfig, CrcConfig
from .base import Engine
from .checksum import ChecksumEngine
from .crc import CrcEngine, build_table, finalize, unfinalize
from .reflect import reflect_bits, reflect_byte, reflect_bytes

logger = logging.getLogger(__name__)


def engine_for(config: BaseConfig) -> Engine:
    """Bind a configuration to the engine for its variant.

    Args:
        config: ChecksumConfig or CrcConfig

    Returns:
        A new engine bound to ``config``. Its lookup table is not built yet.

    Raises:
        UnsupportedConfigurationError: If no engine handles this configuration kind
    """
    engine: Engine
    if isinstance(config, CrcConfig):
        engine = CrcEngine(config)
    elif isinstance(config, ChecksumConfig):
        engine = ChecksumEngine(config)
    else:
        raise UnsupportedConfigurationError(
            f"No engine for configuration {type(config).__name__} ({getattr(config, 'name', '?')})"
        )
    logger.debug("Bound %s to %s", config.name, type(engine).__name__)
    return engine


__all__ = [
    "Engine",
    "ChecksumEngine",
    "CrcEngine",
    "engine_for",
    "build_table",
    "finalize",
    "unfinalize",
    "reflect_bits",
    "reflect_byte",
    "reflect_bytes",
]
