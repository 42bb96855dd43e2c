"""Reference configurations and check values shared by the tests."""

from __future__ import annotations

from typing import Dict, Tuple, Union

from crckit import CATALOG, ChecksumConfig, CrcConfig

AnyConfig = Union[ChecksumConfig, CrcConfig]

CHECK_MESSAGE = b"123456789"

# Catalog check values for CHECK_MESSAGE
CATALOG_CHECKS: Dict[str, int] = {
    "8-bit Checksum": 0xDD,
    "16-bit Checksum": 0x01DD,
    "32-bit Checksum": 0x000001DD,
    "CRC-16": 0xBB3D,
    "CRC-16 Modbus": 0x4B37,
    "CRC-CCITT": 0x29B1,
    "CRC-CCITT XModem": 0x31C3,
    "CRC-CCITT 0x1D0F": 0xE5CC,
    "CRC-CCITT Kermit": 0x8921,
    "CRC-DNP": 0x82EA,
    "CRC-32": 0xCBF43926,
}

# Widths outside the catalog, with RevEng check values for CHECK_MESSAGE
EXTRA_CHECKS: Tuple[Tuple[CrcConfig, int], ...] = (
    (CrcConfig(name="CRC-3/GSM", bits=3, polynomial=0x3, final_xor_value=0x7), 0x4),
    (
        CrcConfig(
            name="CRC-4/G-704",
            bits=4,
            polynomial=0x3,
            reflect_input_bits=True,
            reflect_output_bits=True,
        ),
        0x7,
    ),
    (
        CrcConfig(
            name="CRC-5/USB",
            bits=5,
            polynomial=0x05,
            initial_value=0x1F,
            final_xor_value=0x1F,
            reflect_input_bits=True,
            reflect_output_bits=True,
        ),
        0x19,
    ),
    (CrcConfig(name="CRC-8/SMBUS", bits=8, polynomial=0x07), 0xF4),
    (
        CrcConfig(name="CRC-12/UMTS", bits=12, polynomial=0x80F, reflect_output_bits=True),
        0xDAF,
    ),
    (
        CrcConfig(name="CRC-24/OPENPGP", bits=24, polynomial=0x864CFB, initial_value=0xB704CE),
        0x21CF02,
    ),
    (
        CrcConfig(
            name="CRC-64/XZ",
            bits=64,
            polynomial=0x42F0E1EBA9EA3693,
            initial_value=0xFFFFFFFFFFFFFFFF,
            final_xor_value=0xFFFFFFFFFFFFFFFF,
            reflect_input_bits=True,
            reflect_output_bits=True,
        ),
        0x995DC9BBDF1939FA,
    ),
)

ALL_CONFIGS: Tuple[AnyConfig, ...] = tuple(CATALOG.values()) + tuple(
    config for config, _ in EXTRA_CHECKS
)


