"""Preconfigured checksums and CRCs.

Parameters follow the Rocksoft/Williams model. Check values for the ASCII
message "123456789":

============================  ==========
Name                          Check
============================  ==========
8-bit Checksum                0xDD
16-bit Checksum               0x01DD
32-bit Checksum               0x000001DD
CRC-16                        0xBB3D
CRC-16 Modbus                 0x4B37
CRC-CCITT                     0x29B1
CRC-CCITT XModem              0x31C3
CRC-CCITT 0x1D0F              0xE5CC
CRC-CCITT Kermit              0x8921
CRC-DNP                       0x82EA
CRC-32                        0xCBF43926
============================  ==========

Kermit and DNP reflect the output bytes, so their check values are the
byte-swapped RevEng values (0x2189 and 0xEA82).
"""

from __future__ import annotations

from typing import Dict, Union

from .exceptions import ConfigurationError
from .models import ChecksumConfig, CrcConfig

CHECKSUM_8 = ChecksumConfig(name="8-bit Checksum", bits=8)
CHECKSUM_16 = ChecksumConfig(name="16-bit Checksum", bits=16)
CHECKSUM_32 = ChecksumConfig(name="32-bit Checksum", bits=32)

CRC_16 = CrcConfig(
    name="CRC-16",
    bits=16,
    polynomial=0x8005,
    initial_value=0x0000,
    final_xor_value=0x0000,
    reflect_input_bits=True,
    reflect_output_bits=True,
    reflect_output_bytes=False,
)
CRC_16_MODBUS = CrcConfig(
    name="CRC-16 Modbus",
    bits=16,
    polynomial=0x8005,
    initial_value=0xFFFF,
    final_xor_value=0x0000,
    reflect_input_bits=True,
    reflect_output_bits=True,
    reflect_output_bytes=False,
)
CRC_CCITT = CrcConfig(
    name="CRC-CCITT",
    bits=16,
    polynomial=0x1021,
    initial_value=0xFFFF,
    final_xor_value=0x0000,
    reflect_input_bits=False,
    reflect_output_bits=False,
    reflect_output_bytes=False,
)
CRC_CCITT_XMODEM = CrcConfig(
    name="CRC-CCITT XModem",
    bits=16,
    polynomial=0x1021,
    initial_value=0x0000,
    final_xor_value=0x0000,
    reflect_input_bits=False,
    reflect_output_bits=False,
    reflect_output_bytes=False,
)
CRC_CCITT_1D0F = CrcConfig(
    name="CRC-CCITT 0x1D0F",
    bits=16,
    polynomial=0x1021,
    initial_value=0x1D0F,
    final_xor_value=0x0000,
    reflect_input_bits=False,
    reflect_output_bits=False,
    reflect_output_bytes=False,
)
CRC_CCITT_KERMIT = CrcConfig(
    name="CRC-CCITT Kermit",
    bits=16,
    polynomial=0x1021,
    initial_value=0x0000,
    final_xor_value=0x0000,
    reflect_input_bits=True,
    reflect_output_bits=True,
    reflect_output_bytes=True,
)
CRC_DNP = CrcConfig(
    name="CRC-DNP",
    bits=16,
    polynomial=0x3D65,
    initial_value=0x0000,
    final_xor_value=0xFFFF,
    reflect_input_bits=True,
    reflect_output_bits=True,
    reflect_output_bytes=True,
)
CRC_32 = CrcConfig(
    name="CRC-32",
    bits=32,
    polynomial=0x04C11DB7,
    initial_value=0xFFFFFFFF,
    final_xor_value=0xFFFFFFFF,
    reflect_input_bits=True,
    reflect_output_bits=True,
    reflect_output_bytes=False,
)

CATALOG: Dict[str, Union[ChecksumConfig, CrcConfig]] = {
    config.name: config
    for config in (
        CHECKSUM_8,
        CHECKSUM_16,
        CHECKSUM_32,
        CRC_16,
        CRC_16_MODBUS,
        CRC_CCITT,
        CRC_CCITT_XMODEM,
        CRC_CCITT_1D0F,
        CRC_CCITT_KERMIT,
        CRC_DNP,
        CRC_32,
    )
}


def get_config(name: str) -> ChecksumConfig | CrcConfig:
    """Look up a preconfigured checksum or CRC by name (case-insensitive).

    Raises:
        ConfigurationError: If no configuration has that name

    Example:
        >>> get_config("crc-32").bits
        32
    """
    wanted = name.casefold()
    for config_name, config in CATALOG.items():
        if config_name.casefold() == wanted:
            return config
    raise ConfigurationError(f"Unknown configuration: {name!r}")
