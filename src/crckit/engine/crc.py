"""CRC engine: bitwise and table-driven polynomial division.

The register is processed MSB-first. Input bytes are XORed into the top byte
of the register and divided by the polynomial eight bits at a time; the
table-driven variant replaces those eight rounds with a lookup of the
precomputed remainder for each possible top byte.

Results handed to callers are always *finalized* (output reflection and XOR
applied). ``unfinalize`` recovers the raw register from such a value so an
incremental computation can resume from nothing but the last value shown.

Widths below 8 bits run in an 8-bit working register with the polynomial
and CRC left-aligned, and are shifted back down after every byte.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Tuple, cast

from ..models import CrcConfig
from .base import Engine, check_byte, check_bytes, check_value
from .reflect import reflect_bits, reflect_byte, reflect_bytes

logger = logging.getLogger(__name__)

Table = Tuple[int, ...]


@dataclass(frozen=True)
class _Register:
    """Working register layout for one configuration.

    Attributes:
        width: Register width in bits (at least 8)
        pad: Zero bits below the CRC when ``bits < 8``
        polynomial: Polynomial aligned to the register
        top_bit: Highest register bit
        mask: Register mask
    """

    width: int
    pad: int
    polynomial: int
    top_bit: int
    mask: int

    @property
    def top_shift(self) -> int:
        return self.width - 8


@lru_cache(maxsize=64)
def _register(config: CrcConfig) -> _Register:
    width = max(config.bits, 8)
    pad = width - config.bits
    return _Register(
        width=width,
        pad=pad,
        polynomial=config.polynomial << pad,
        top_bit=1 << (width - 1),
        mask=(1 << width) - 1,
    )


def _divide(reg: _Register, crc: int) -> int:
    # Modulo-2 division, a bit at a time
    for _ in range(8):
        if crc & reg.top_bit:
            crc = ((crc << 1) & reg.mask) ^ reg.polynomial
        else:
            crc = (crc << 1) & reg.mask
    return crc


def _input(config: CrcConfig, byte: int) -> int:
    return reflect_byte(byte) if config.reflect_input_bits else byte


def finalize(config: CrcConfig, crc: int) -> int:
    """Turn a raw CRC register into the externally visible value.

    Applies, in order: bit reflection, final XOR, byte reflection.
    """
    if config.reflect_output_bits:
        crc = reflect_bits(crc, config.bits)
    crc ^= config.final_xor_value
    if config.reflect_output_bytes:
        crc = reflect_bytes(crc, config.num_bytes)
    return crc


def unfinalize(config: CrcConfig, value: int) -> int:
    """Undo ``finalize`` to recover the raw CRC register for an incremental update."""
    if config.reflect_output_bytes:
        value = reflect_bytes(value, config.num_bytes)
    value ^= config.final_xor_value
    if config.reflect_output_bits:
        value = reflect_bits(value, config.bits)
    return value


def _start(config: CrcConfig, value: int | None) -> int:
    check_value(config, value)
    return config.initial_value if value is None else unfinalize(config, value)


# Bitwise (reference) algorithm


def _slow_core(config: CrcConfig, reg: _Register, crc: int, byte: int) -> int:
    crc = (crc << reg.pad) ^ (_input(config, byte) << reg.top_shift)
    return _divide(reg, crc) >> reg.pad


def compute_slow(config: CrcConfig, data: Iterable[int]) -> int:
    """Calculate the CRC of a whole message bit by bit.

    Args:
        config: CRC configuration
        data: Message bytes

    Returns:
        Finalized CRC value

    Example:
        >>> from crckit.catalog import CRC_32
        >>> hex(compute_slow(CRC_32, b"123456789"))
        '0xcbf43926'
    """
    reg = _register(config)
    crc = config.initial_value
    for byte in check_bytes(data):
        crc = _slow_core(config, reg, crc, byte)
    return finalize(config, crc)


def update_slow(config: CrcConfig, value: int | None, byte: int) -> int:
    """Fold one byte into a finalized CRC value bit by bit.

    Args:
        config: CRC configuration
        value: CRC returned by a previous call, or None to start
        byte: Next message byte (0-255)

    Returns:
        Finalized CRC of the message so far
    """
    check_byte(byte)
    crc = _slow_core(config, _register(config), _start(config, value), byte)
    return finalize(config, crc)


# Table-driven algorithm


@lru_cache(maxsize=64)
def build_table(config: CrcConfig) -> Table:
    """Compute the remainder of every possible top byte.

    The table depends only on the width and polynomial, and is cached per
    configuration. The returned tuple is immutable and safe to share.
    """
    reg = _register(config)
    table = tuple(_divide(reg, dividend << reg.top_shift) for dividend in range(256))
    logger.debug(
        "Built CRC table for %s (%d-bit, poly=%#x)", config.name, config.bits, config.polynomial
    )
    return table


def _fast_core(config: CrcConfig, reg: _Register, table: Table, crc: int, byte: int) -> int:
    crc <<= reg.pad
    index = _input(config, byte) ^ (crc >> reg.top_shift)
    crc = ((crc << 8) & reg.mask) ^ table[index]
    return crc >> reg.pad


def compute_fast(config: CrcConfig, data: Iterable[int], table: Table | None = None) -> int:
    """Calculate the CRC of a whole message using the lookup table.

    Args:
        config: CRC configuration
        data: Message bytes
        table: Table from ``build_table(config)``; looked up if omitted

    Returns:
        Finalized CRC value, identical to ``compute_slow``
    """
    if table is None:
        table = build_table(config)
    reg = _register(config)
    crc = config.initial_value
    for byte in check_bytes(data):
        crc = _fast_core(config, reg, table, crc, byte)
    return finalize(config, crc)


def update_fast(
    config: CrcConfig, value: int | None, byte: int, table: Table | None = None
) -> int:
    """Fold one byte into a finalized CRC value using the lookup table."""
    check_byte(byte)
    if table is None:
        table = build_table(config)
    crc = _fast_core(config, _register(config), table, _start(config, value), byte)
    return finalize(config, crc)


class CrcEngine(Engine):
    """Engine for CrcConfig owning one lookup table.

    The table is built on the first call to ``init_table`` (or on the first
    fast computation) under a lock, and never changes afterwards.

    Example:
        >>> from crckit.catalog import CRC_CCITT_XMODEM
        >>> engine = CrcEngine(CRC_CCITT_XMODEM)
        >>> engine.compute_fast(b"123456789") == engine.compute_slow(b"123456789")
        True
    """

    def __init__(self, config: CrcConfig) -> None:
        self.config = config
        self._table: Table | None = None
        self._lock = threading.Lock()

    @property
    def table(self) -> Table:
        """The 256-entry remainder table, built on first access."""
        self.init_table()
        return cast(Table, self._table)

    def init_table(self) -> None:
        if self._table is not None:
            return
        with self._lock:
            if self._table is None:
                self._table = build_table(self.config)

    def compute_slow(self, data: Iterable[int]) -> int:
        return compute_slow(self.config, data)

    def update_slow(self, value: int | None, byte: int) -> int:
        return update_slow(self.config, value, byte)

    def compute_fast(self, data: Iterable[int]) -> int:
        return compute_fast(self.config, data, self.table)

    def update_fast(self, value: int | None, byte: int) -> int:
        return update_fast(self.config, value, byte, self.table)
