"""Running-sum checksum engine.

Bytes are added as unsigned values (0-255) and the sum is masked to the
configured width. There is no finalize step: the running sum is already the
externally visible value, so resuming simply continues from it.
"""

from __future__ import annotations

from typing import Iterable

from ..models import ChecksumConfig
from .base import Engine, check_byte, check_bytes, check_value


def compute(config: ChecksumConfig, data: Iterable[int]) -> int:
    """Calculate the checksum of a whole message.

    Args:
        config: Checksum configuration
        data: Message bytes

    Returns:
        Checksum value, masked to ``config.bits``

    Example:
        >>> from crckit.catalog import CHECKSUM_8
        >>> compute(CHECKSUM_8, [1, 2, 3, 4])
        10
    """
    return (config.initial_value + sum(check_bytes(data))) & config.mask


def update(config: ChecksumConfig, value: int | None, byte: int) -> int:
    """Add one byte to a running checksum.

    Args:
        config: Checksum configuration
        value: Checksum so far, or None to start from ``initial_value``
        byte: Next message byte (0-255)

    Returns:
        Checksum of the message so far
    """
    check_byte(byte)
    check_value(config, value)
    total = config.initial_value if value is None else value
    return (total + byte) & config.mask


class ChecksumEngine(Engine):
    """Engine for ChecksumConfig. Slow and fast paths are the same algorithm."""

    def __init__(self, config: ChecksumConfig) -> None:
        self.config = config

    def init_table(self) -> None:
        pass

    def compute_slow(self, data: Iterable[int]) -> int:
        return compute(self.config, data)

    def update_slow(self, value: int | None, byte: int) -> int:
        return update(self.config, value, byte)

    def compute_fast(self, data: Iterable[int]) -> int:
        return compute(self.config, data)

    def update_fast(self, value: int | None, byte: int) -> int:
        return update(self.config, value, byte)
