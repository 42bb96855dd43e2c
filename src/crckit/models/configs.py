"""Checksum and CRC configuration variants.

Each configuration carries a ``kind`` tag. The tag is the discriminator of
the ``Config`` union, which lets plain mappings be validated into the right
variant and lets the engine layer dispatch on the variant.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import Field, TypeAdapter

from ..exceptions import ConfigurationError
from .base import BaseConfig


class ChecksumConfig(BaseConfig):
    """Running sum of bytes, masked to the configured width.

    Example:
        >>> config = ChecksumConfig(name="8-bit Checksum", bits=8)
        >>> config.mask
        255
    """

    kind: Literal["checksum"] = "checksum"


class CrcConfig(BaseConfig):
    """Parameterized CRC in the Rocksoft/Williams model.

    Attributes:
        polynomial: Generator polynomial, without the implicit top bit
        final_xor_value: XOR value applied to the final CRC
        reflect_input_bits: Reverse the bits of every input byte
        reflect_output_bits: Reverse all ``bits`` bits of the final CRC
        reflect_output_bytes: Reverse the byte order of the final CRC

    Derived:
        top_bit: Highest bit of the CRC register

    Example:
        >>> crc32 = CrcConfig(
        ...     name="CRC-32", bits=32, polynomial=0x04C11DB7,
        ...     initial_value=0xFFFFFFFF, final_xor_value=0xFFFFFFFF,
        ...     reflect_input_bits=True, reflect_output_bits=True,
        ... )
        >>> hex(crc32.top_bit)
        '0x80000000'
    """

    kind: Literal["crc"] = "crc"
    polynomial: int
    final_xor_value: int = 0
    reflect_input_bits: bool = False
    reflect_output_bits: bool = False
    reflect_output_bytes: bool = False

    @property
    def top_bit(self) -> int:
        return 1 << (self.bits - 1)

    def check_parameters(self) -> None:
        super().check_parameters()
        self.check_fits("polynomial", self.polynomial)
        self.check_fits("final_xor_value", self.final_xor_value)
        if self.reflect_output_bytes and self.bits % 8:
            raise ConfigurationError(
                f"{self.name}: reflect_output_bytes requires a whole number of bytes, "
                f"got {self.bits} bits"
            )


Config = Annotated[Union[ChecksumConfig, CrcConfig], Field(discriminator="kind")]

_config_adapter: TypeAdapter[Any] = TypeAdapter(Config)


def parse_config(data: Mapping[str, Any]) -> ChecksumConfig | CrcConfig:
    """Validate a plain mapping into the matching configuration variant.

    Args:
        data: Mapping with a ``kind`` key ("checksum" or "crc") and the
            variant's fields

    Returns:
        A frozen ChecksumConfig or CrcConfig

    Raises:
        ConfigurationError: If the values are out of range
        pydantic.ValidationError: If fields are missing, unknown or of the wrong type

    Example:
        >>> config = parse_config({"kind": "crc", "name": "XModem", "bits": 16, "polynomial": 0x1021})
        >>> type(config).__name__
        'CrcConfig'
    """
    config: ChecksumConfig | CrcConfig = _config_adapter.validate_python(dict(data))
    return config
