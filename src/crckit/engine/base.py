"""Abstract interface shared by the checksum and CRC engines.

An engine is bound to one configuration and exposes two algorithms:

- **slow**: the reference algorithm, computed bit by bit
- **fast**: the table-driven algorithm (identical to slow for checksums)

Both produce bit-identical results. Results passed back into ``update_*``
must be the finalized values previously returned by the same engine kind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ..models import BaseConfig


class Engine(ABC):
    """Checksum/CRC computation bound to a single configuration."""

    config: BaseConfig

    @abstractmethod
    def init_table(self) -> None:
        """Prepare any lookup data needed by the fast algorithm (idempotent)."""

    @abstractmethod
    def compute_slow(self, data: Iterable[int]) -> int:
        """Compute the result of a whole message with the reference algorithm."""

    @abstractmethod
    def update_slow(self, value: int | None, byte: int) -> int:
        """Fold one byte into a finalized value (None to start) with the reference algorithm."""

    @abstractmethod
    def compute_fast(self, data: Iterable[int]) -> int:
        """Compute the result of a whole message with the fast algorithm."""

    @abstractmethod
    def update_fast(self, value: int | None, byte: int) -> int:
        """Fold one byte into a finalized value (None to start) with the fast algorithm."""


def check_bytes(data: Iterable[int]) -> bytes:
    """Validate a whole message, returning it as bytes.

    Raises:
        ValueError: If any value is outside 0-255
        TypeError: If data is not bytes-like or an iterable of integers
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, int):
        raise TypeError("data must be bytes-like or an iterable of ints, got int")
    return bytes(data)


def check_byte(byte: int) -> None:
    """Validate a single input byte.

    Raises:
        ValueError: If byte is outside 0-255
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be 0-255, got {byte}")


def check_value(config: BaseConfig, value: int | None) -> None:
    """Validate a previously returned (finalized) value before resuming from it.

    Raises:
        ValueError: If value is outside the configuration's mask
    """
    if value is not None and not 0 <= value <= config.mask:
        raise ValueError(f"{config.name}: value must be 0-{config.mask:#x}, got {value:#x}")
