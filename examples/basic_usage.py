#!/usr/bin/env python3
"""Basic usage example for crckit.

This example demonstrates:
1. Calculating catalog CRCs and checksums of a whole message
2. Incremental calculation, pausing and resuming from the last value
3. Defining a custom CRC
4. Serializing and verifying a CRC
"""

from __future__ import annotations

from crckit import CATALOG, CRC_CCITT_KERMIT, Calculator, CrcConfig, calculate, to_bytes, verify


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("crckit Basic Usage Example")
    print("=" * 60)
    print()

    message = b"123456789"

    # Whole-message calculation over the catalog
    print(f"1. Check values of {message!r}...")
    for name, config in CATALOG.items():
        width = (config.bits + 3) // 4
        print(f"   {name:<20} 0x{calculate(config, message):0{width}X}")
    print()

    # Incremental calculation
    print("2. Incremental CRC-CCITT Kermit, resumed mid-message...")
    calc = Calculator(CRC_CCITT_KERMIT)
    value = None
    for byte in message[:4]:
        value = calc.update(value, byte)
    print(f"   After {message[:4]!r}: 0x{value:04X}")

    # Only the shown value is needed to carry on, even on a new calculator
    resumed = Calculator(CRC_CCITT_KERMIT)
    for byte in message[4:]:
        value = resumed.update(value, byte)
    print(f"   After {message!r}: 0x{value:04X}")
    print()

    # Custom configuration
    print("3. Custom CRC-5/USB...")
    crc5 = CrcConfig(
        name="CRC-5/USB",
        bits=5,
        polynomial=0x05,
        initial_value=0x1F,
        final_xor_value=0x1F,
        reflect_input_bits=True,
        reflect_output_bits=True,
    )
    print(f"   {crc5.name}: 0x{calculate(crc5, message):02X}")
    print()

    # Serialization and verification
    print("4. Serializing and verifying...")
    crc_bytes = to_bytes(CRC_CCITT_KERMIT, value)
    print(f"   Bytes: {crc_bytes.hex()}")
    print(f"   Verified: {verify(CRC_CCITT_KERMIT, message, crc_bytes)}")


if __name__ == "__main__":
    main()
