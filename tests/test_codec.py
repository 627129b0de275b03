"""Tests for integer, text and digit string conversions."""

import pytest

from flexbits import BitArray, InvalidArgumentError
from flexbits import codec


class TestIntegers:
    """Test fixed-width integer construction and reading."""

    def test_int16(self) -> None:
        """Test that 257 stores as two 0x01 bytes."""
        bits = BitArray.from_int16(257)
        assert bits.byte_size == 2
        assert bits.size == 16
        assert str(bits) == "00000001 00000001"

    def test_int64(self) -> None:
        """Test that 2**56 + 1 sets the low bit of the first and last byte."""
        bits = BitArray.from_int64(72057594037927937)
        assert bits.byte_size == 8
        assert str(bits) == (
            "00000001 00000000 00000000 00000000 "
            "00000000 00000000 00000000 00000001"
        )

    def test_little_endian(self) -> None:
        """Test that byte 0 is the least-significant byte."""
        bits = BitArray.from_int32(0x12345678)
        assert bits.to_bytes() == b"\x78\x56\x34\x12"
        assert bits.get_nth_byte(0) == 0x78

    def test_int8_negative(self) -> None:
        """Test two's complement for negative values."""
        assert str(BitArray.from_int8(-1)) == "11111111"
        assert str(BitArray.from_int8(-128)) == "10000000"

    def test_int32_negative(self) -> None:
        """Test a negative 32-bit value."""
        bits = BitArray.from_int32(-2)
        assert bits.to_bytes() == b"\xfe\xff\xff\xff"

    @pytest.mark.parametrize(
        "bits,value",
        [(8, 128), (8, -129), (16, 32768), (32, 2**31), (64, -(2**63) - 1)],
    )
    def test_out_of_range_raises(self, bits: int, value: int) -> None:
        """Test values outside the signed range raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            BitArray.from_int(value, bits)

    def test_unsupported_width(self) -> None:
        """Test that only 8, 16, 32 and 64 bits are supported."""
        with pytest.raises(InvalidArgumentError):
            BitArray.from_int(1, 24)

    def test_to_int(self) -> None:
        """Test reading integers back."""
        assert BitArray.from_int16(-300).to_int16() == -300
        assert BitArray.from_int64(2**62 + 5).to_int64() == 2**62 + 5
        assert BitArray.from_int8(0x7F).to_int8() == 127

    def test_to_int_short_buffer(self) -> None:
        """Test that a short buffer is zero-extended."""
        bits = BitArray.from_bytes(b"\xff")
        assert bits.to_int8() == -1
        assert bits.to_int16() == 255
        assert bits.to_int32() == 255

    def test_to_int_reads_low_bytes(self) -> None:
        """Test that bytes above the width are ignored."""
        bits = BitArray.from_bytes(b"\x01\x02\x03")
        assert bits.to_int8() == 1
        assert bits.to_int16() == 0x0201


class TestParse:
    """Test binary digit string parsing."""

    def test_parse_and_render(self) -> None:
        """Test that rendering regroups digits into 8-bit chunks."""
        bits = BitArray.parse("111000 10100101")
        assert bits.size == 14
        assert bits.byte_size == 2
        assert str(bits) == "00111000 10100101"

    def test_rightmost_digit_is_bit_zero(self) -> None:
        """Test digit order."""
        bits = BitArray.parse("100")
        assert not bits.get(0)
        assert not bits.get(1)
        assert bits.get(2)

    def test_whitespace_ignored(self) -> None:
        """Test tabs, newlines and repeated spaces are skipped."""
        bits = BitArray.parse("  1111\t0000\n 1  ")
        assert str(bits) == "00000001 11100001"

    def test_empty(self) -> None:
        """Test that an empty string yields an empty array."""
        bits = BitArray.parse("")
        assert bits.size == 0
        assert bits.byte_size == 0
        assert str(bits) == ""

    def test_whitespace_only(self) -> None:
        """Test that whitespace alone yields an empty array."""
        assert BitArray.parse("   ").size == 0

    @pytest.mark.parametrize("digits", ["102", "1 a", "0b101", "１"])
    def test_invalid_character(self, digits: str) -> None:
        """Test that anything but 0, 1 and whitespace is rejected."""
        with pytest.raises(InvalidArgumentError):
            BitArray.parse(digits)

    def test_invalid_character_message(self) -> None:
        """Test the error names the character and offset."""
        with pytest.raises(InvalidArgumentError, match=r"'x' at offset 3"):
            codec.parse_digits("101x")

    def test_render_parse_round_trip(self) -> None:
        """Test that parse(render(x)) reproduces a byte-aligned array."""
        original = BitArray.from_bytes(b"\x00\x80\x7f\xff")
        assert BitArray.parse(str(original)) == original


class TestRender:
    """Test rendering."""

    def test_render_highest_byte_first(self) -> None:
        """Test byte and bit order of the rendering."""
        bits = BitArray.from_bytes(b"\x01\x02")
        assert bits.render() == "00000010 00000001"

    def test_render_empty(self) -> None:
        """Test that an empty buffer renders as an empty string."""
        assert codec.render(b"") == ""

    def test_render_includes_padding_bytes(self) -> None:
        """Test that all buffer bytes are rendered, not just size bits."""
        bits = BitArray(3)
        bits.active(2)
        assert str(bits) == "00000100"


class TestText:
    """Test text construction."""

    def test_from_text_encoding_order(self) -> None:
        """Test that the first encoded byte is byte 0."""
        bits = BitArray.from_text("AB")
        assert bits.get_nth_byte(0) == ord("A")
        assert bits.get_nth_byte(1) == ord("B")
        assert bits.size == 16
        assert str(bits) == "01000010 01000001"

    def test_from_text_utf8_default(self) -> None:
        """Test multi-byte UTF-8 characters."""
        bits = BitArray.from_text("é")
        assert bits.to_bytes() == b"\xc3\xa9"

    def test_from_text_encoding(self) -> None:
        """Test an explicit encoding."""
        bits = BitArray.from_text("é", "latin-1")
        assert bits.to_bytes() == b"\xe9"
        assert bits.to_text("latin-1") == "é"

    def test_to_text(self) -> None:
        """Test decoding back to text."""
        assert BitArray.from_text("hello").to_text() == "hello"

    def test_unknown_encoding(self) -> None:
        """Test that an unknown codec raises LookupError."""
        with pytest.raises(LookupError):
            BitArray.from_text("x", "no-such-codec")
