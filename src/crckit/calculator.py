"""Whole-message and incremental checksum/CRC calculation.

Two ways to calculate:

- Module functions ``calculate`` and ``update`` take the configuration on
  every call and use the bitwise algorithm, so no lookup table is built.
- ``Calculator`` binds one configuration, builds its lookup table up front
  and uses the table-driven algorithm.

Both accept the value returned by a previous ``update`` to resume an
incremental calculation, and produce identical results.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from .engine import Engine, engine_for
from .engine.base import check_bytes
from .models import BaseConfig

logger = logging.getLogger(__name__)

Message = Union[bytes, bytearray, memoryview, str, Iterable[int]]


def as_bytes(message: Message) -> bytes:
    """Normalize a message to bytes.

    Strings are UTF-8 encoded. Any other iterable must yield integers 0-255.

    Raises:
        ValueError: If an integer is outside 0-255
        TypeError: If the message is not bytes-like, a string, or an iterable of integers
    """
    if isinstance(message, str):
        return message.encode("utf-8")
    return check_bytes(message)


def calculate(config: BaseConfig, message: Message) -> int:
    """Calculate the checksum or CRC of a whole message.

    Args:
        config: Checksum or CRC configuration
        message: Message to calculate over (bytes-like, str, or iterable of ints)

    Returns:
        Result masked to ``config.bits``

    Raises:
        UnsupportedConfigurationError: If no engine handles this configuration kind

    Example:
        >>> from crckit.catalog import CRC_32
        >>> hex(calculate(CRC_32, "123456789"))
        '0xcbf43926'
    """
    return engine_for(config).compute_slow(as_bytes(message))


def update(config: BaseConfig, value: int | None, byte: int) -> int:
    """Add one byte to an incremental checksum or CRC.

    Args:
        config: Checksum or CRC configuration
        value: Result of the previous update, or None to start
        byte: Next message byte (0-255)

    Returns:
        Result for the message so far

    Example:
        >>> from crckit.catalog import CHECKSUM_8
        >>> value = None
        >>> for b in (1, 2, 3, 4):
        ...     value = update(CHECKSUM_8, value, b)
        >>> value
        10
    """
    return engine_for(config).update_slow(value, byte)


class Calculator:
    """Table-driven calculator bound to one configuration.

    The engine and its lookup table are created in the constructor and are
    read-only afterwards, so one Calculator can be shared between threads.
    Incremental values are owned by the caller; concurrent streams must each
    keep their own.

    Attributes:
        config: Bound configuration

    Example:
        >>> from crckit.catalog import CRC_CCITT_XMODEM
        >>> calc = Calculator(CRC_CCITT_XMODEM)
        >>> hex(calc.calculate(b"123456789"))
        '0x31c3'
    """

    def __init__(self, config: BaseConfig) -> None:
        self.config = config
        self._engine: Engine = engine_for(config)
        self._engine.init_table()
        logger.debug("Calculator ready for %s", config.name)

    def __repr__(self) -> str:
        return f"Calculator({self.config.name!r})"

    def calculate(self, message: Message) -> int:
        """Calculate the result of a whole message with the table-driven algorithm."""
        return self._engine.compute_fast(as_bytes(message))

    def update(self, value: int | None, byte: int) -> int:
        """Add one byte to an incremental result with the table-driven algorithm."""
        return self._engine.update_fast(value, byte)

    def calculate_slow(self, message: Message) -> int:
        """Calculate the result of a whole message with the bitwise algorithm."""
        return self._engine.compute_slow(as_bytes(message))

    def update_slow(self, value: int | None, byte: int) -> int:
        """Add one byte to an incremental result with the bitwise algorithm."""
        return self._engine.update_slow(value, byte)
