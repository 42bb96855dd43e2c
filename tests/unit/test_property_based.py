"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from crckit import BaseConfig, Calculator, ChecksumConfig, CrcConfig, calculate, update
from crckit.engine.crc import compute_fast, compute_slow, finalize, unfinalize
from crckit.engine.reflect import reflect_bits, reflect_bytes
from tests.vectors import ALL_CONFIGS


@st.composite
def crc_configs(draw: st.DrawFn) -> CrcConfig:
    """Arbitrary valid CRC configurations of 1-64 bits."""
    bits = draw(st.integers(min_value=1, max_value=64))
    mask = (1 << bits) - 1
    return CrcConfig(
        name=f"CRC-{bits}/random",
        bits=bits,
        polynomial=draw(st.integers(min_value=0, max_value=mask)),
        initial_value=draw(st.integers(min_value=0, max_value=mask)),
        final_xor_value=draw(st.integers(min_value=0, max_value=mask)),
        reflect_input_bits=draw(st.booleans()),
        reflect_output_bits=draw(st.booleans()),
        reflect_output_bytes=bits % 8 == 0 and draw(st.booleans()),
    )


@st.composite
def checksum_configs(draw: st.DrawFn) -> ChecksumConfig:
    """Arbitrary valid checksum configurations of 1-64 bits."""
    bits = draw(st.integers(min_value=1, max_value=64))
    return ChecksumConfig(
        name=f"Checksum-{bits}/random",
        bits=bits,
        initial_value=draw(st.integers(min_value=0, max_value=(1 << bits) - 1)),
    )


any_configs = st.one_of(st.sampled_from(ALL_CONFIGS), crc_configs(), checksum_configs())
messages = st.binary(min_size=0, max_size=64)


class TestReflectionProperties:
    """Property-based tests for reflection."""

    @given(value=st.integers(min_value=0, max_value=(1 << 64) - 1), width=st.integers(0, 64))
    def test_reflect_bits_involution(self, value: int, width: int) -> None:
        """Test reflecting bits twice restores the low bits."""
        low = value & ((1 << width) - 1)
        assert reflect_bits(reflect_bits(value, width), width) == low

    @given(value=st.integers(min_value=0, max_value=(1 << 64) - 1), count=st.integers(0, 8))
    def test_reflect_bytes_involution(self, value: int, count: int) -> None:
        """Test reflecting bytes twice restores the low bytes."""
        low = value & ((1 << (8 * count)) - 1)
        assert reflect_bytes(reflect_bytes(value, count), count) == low


class TestCrcProperties:
    """Property-based tests for the CRC engine."""

    @given(config=crc_configs(), data=messages)
    def test_slow_fast_equivalence(self, config: CrcConfig, data: bytes) -> None:
        """Test the bitwise and table-driven algorithms agree."""
        assert compute_slow(config, data) == compute_fast(config, data)

    @given(config=crc_configs(), data=st.data())
    def test_finalize_round_trip(self, config: CrcConfig, data: st.DataObject) -> None:
        """Test unfinalize inverts finalize in both directions."""
        value = data.draw(st.integers(min_value=0, max_value=config.mask))

        assert finalize(config, unfinalize(config, value)) == value
        assert unfinalize(config, finalize(config, value)) == value

    @given(config=crc_configs())
    def test_empty_message(self, config: CrcConfig) -> None:
        """Test the CRC of nothing is the finalized initial value."""
        expected = finalize(config, config.initial_value)

        assert compute_slow(config, b"") == expected
        assert compute_fast(config, b"") == expected


class TestFacadeProperties:
    """Property-based tests across checksums and CRCs."""

    @given(config=any_configs, data=messages)
    def test_incremental_equivalence(self, config: BaseConfig, data: bytes) -> None:
        """Test folding updates from None matches the whole-message result."""
        calc = Calculator(config)
        slow = fast = None
        for byte in data:
            slow = update(config, slow, byte)
            fast = calc.update(fast, byte)

        expected = calculate(config, data)
        if data:
            assert slow == fast == expected
        assert calc.calculate(data) == expected

    @given(config=any_configs, data=messages)
    def test_result_masked(self, config: BaseConfig, data: bytes) -> None:
        """Test every result fits the configured width."""
        assert 0 <= calculate(config, data) <= config.mask
        assert 0 <= Calculator(config).calculate(data) <= config.mask

    @given(config=any_configs, head=messages, tail=messages)
    def test_resume_after_split(self, config: BaseConfig, head: bytes, tail: bytes) -> None:
        """Test resuming from the value of a prefix matches the full message."""
        calc = Calculator(config)
        value = calc.calculate(head) if head else None
        for byte in tail:
            value = calc.update(value, byte)

        if head or tail:
            assert value == calculate(config, head + tail)
