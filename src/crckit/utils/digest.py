"""Result serialization and verification helpers."""

from __future__ import annotations

from typing import Literal

from ..calculator import Message, calculate
from ..models import BaseConfig

ByteOrder = Literal["big", "little"]


def digest_size(config: BaseConfig) -> int:
    """Number of bytes needed to hold a result of ``config.bits`` bits."""
    return (config.bits + 7) // 8


def to_bytes(config: BaseConfig, value: int, byteorder: ByteOrder = "big") -> bytes:
    """Serialize a checksum/CRC value.

    Args:
        config: Configuration the value was computed with
        value: Checksum or CRC value
        byteorder: "big" (default) or "little"

    Returns:
        ``digest_size(config)`` bytes

    Raises:
        ValueError: If value does not fit in ``config.bits`` bits

    Example:
        >>> from crckit.catalog import CRC_CCITT
        >>> to_bytes(CRC_CCITT, 0x29B1)
        b')\\xb1'
    """
    if not 0 <= value <= config.mask:
        raise ValueError(f"{config.name}: value must be 0-{config.mask:#x}, got {value:#x}")
    return value.to_bytes(digest_size(config), byteorder)


def verify(
    config: BaseConfig,
    data: Message,
    expected: int | bytes,
    byteorder: ByteOrder = "big",
) -> bool:
    """Check a message against an expected checksum/CRC.

    Args:
        config: Checksum or CRC configuration
        data: Message to verify
        expected: Expected value, as an int or as serialized bytes
        byteorder: Byte order of ``expected`` when given as bytes

    Returns:
        True if the calculated value matches, False otherwise

    Raises:
        ValueError: If ``expected`` is bytes of the wrong length

    Example:
        >>> from crckit.catalog import CRC_32
        >>> verify(CRC_32, b"123456789", 0xCBF43926)
        True
    """
    if isinstance(expected, (bytes, bytearray)):
        size = digest_size(config)
        if len(expected) != size:
            raise ValueError(f"{config.name} must be {size} bytes, got {len(expected)}")
        expected = int.from_bytes(expected, byteorder)

    return calculate(config, data) == expected
