"""Utility functions for crckit.

This module provides helpers to serialize and verify checksum/CRC values.
"""

from __future__ import annotations

from .digest import digest_size, to_bytes, verify

__all__ = [
    "digest_size",
    "to_bytes",
    "verify",
]
