"""Bit and byte reflection.

Reflection reverses the order of the low ``width`` bits (or ``count`` bytes)
of a value. Anything above that range is dropped, so both transforms are
their own inverse on values that fit.
"""

from __future__ import annotations


def reflect_bits(value: int, width: int) -> int:
    """Reverse the order of the low ``width`` bits of ``value``.

    Example:
        >>> bin(reflect_bits(0b0011, 4))
        '0b1100'
    """
    reflection = 0
    for _ in range(width):
        reflection = (reflection << 1) | (value & 1)
        value >>= 1
    return reflection


def reflect_bytes(value: int, count: int) -> int:
    """Reverse the order of the low ``count`` bytes of ``value``.

    Example:
        >>> hex(reflect_bytes(0x1234, 2))
        '0x3412'
    """
    reflection = 0
    for _ in range(count):
        reflection = (reflection << 8) | (value & 0xFF)
        value >>= 8
    return reflection


_REFLECTED_BYTES = tuple(reflect_bits(i, 8) for i in range(256))


def reflect_byte(value: int) -> int:
    """Reverse the bits of a single byte (0-255) by table lookup."""
    return _REFLECTED_BYTES[value]
