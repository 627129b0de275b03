"""
Growable bit array backed by a byte buffer.

Bit Numbering Convention:
- Bit 0 = LSB of byte 0
- Bit 7 = MSB of byte 0
- Bit 8 = LSB of byte 1, and so on

The buffer grows (exact fit, zero-filled) whenever a setter addresses a
byte beyond the current capacity and never shrinks. ``size`` is the
logical bit length: the length given at construction, raised to one past
the highest bit any setter has addressed.

Every operation validates its arguments before touching the buffer, so a
rejected call leaves the array unchanged.
"""

import logging

from flexbits import codec, logic
from flexbits.codec import BITS_PER_BYTE, DEFAULT_ENCODING
from flexbits.errors import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)

DEFAULT_BYTE_SIZE = 4


class BitArray:
    """Growable bit array with byte-wise logic operations."""

    def __init__(self, length: int = DEFAULT_BYTE_SIZE * BITS_PER_BYTE) -> None:
        """
        Initialize a zeroed bit array.

        Args:
            length: Number of bits (default 32). Storage is rounded up to
                whole bytes.

        Raises:
            InvalidArgumentError: If length is negative
        """
        if length < 0:
            raise InvalidArgumentError(f"length must not be negative, got {length}")

        self._data = bytearray((length + BITS_PER_BYTE - 1) // BITS_PER_BYTE)
        self.size = length

    @classmethod
    def _wrap(cls, data: bytearray, size: int) -> "BitArray":
        # Takes ownership of data; callers pass a fresh buffer
        result = cls.__new__(cls)
        result._data = data
        result.size = size
        return result

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes) -> "BitArray":
        """
        Create a bit array holding a copy of data.

        Byte i of data becomes byte i of the array.
        """
        return cls._wrap(bytearray(data), len(data) * BITS_PER_BYTE)

    @classmethod
    def from_text(cls, text: str, encoding: str = DEFAULT_ENCODING) -> "BitArray":
        """
        Create a bit array from encoded text.

        The encoded bytes are stored in encoding order (first encoded
        byte is byte 0), unlike the little-endian integer constructors.

        Args:
            text: Text to encode
            encoding: Codec name understood by str.encode

        Returns:
            New BitArray
        """
        data = codec.encode_text(text, encoding)
        return cls._wrap(data, len(data) * BITS_PER_BYTE)

    @classmethod
    def from_int(cls, value: int, bits: int) -> "BitArray":
        """
        Create a bit array from a signed integer of the given width.

        Args:
            value: Integer value
            bits: Width in bits (8, 16, 32 or 64)

        Returns:
            New BitArray of bits // 8 bytes, little-endian

        Raises:
            InvalidArgumentError: If the width is unsupported or value
                does not fit
        """
        data = codec.int_to_bytes(value, bits)
        return cls._wrap(data, bits)

    @classmethod
    def from_int8(cls, value: int) -> "BitArray":
        return cls.from_int(value, 8)

    @classmethod
    def from_int16(cls, value: int) -> "BitArray":
        return cls.from_int(value, 16)

    @classmethod
    def from_int32(cls, value: int) -> "BitArray":
        return cls.from_int(value, 32)

    @classmethod
    def from_int64(cls, value: int) -> "BitArray":
        return cls.from_int(value, 64)

    @classmethod
    def parse(cls, digits: str) -> "BitArray":
        """
        Create a bit array from a binary digit string.

        Whitespace is ignored and the rightmost digit is bit 0, so the
        output of render() parses back to the same bits.

        Raises:
            InvalidArgumentError: If digits holds anything but 0, 1 or
                whitespace
        """
        data, size = codec.parse_digits(digits)
        return cls._wrap(data, size)

    def copy(self) -> "BitArray":
        """
        Create a copy of this bit array.

        Returns:
            New BitArray with its own buffer
        """
        return self._wrap(bytearray(self._data), self.size)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    @property
    def byte_size(self) -> int:
        """Number of bytes in the buffer."""
        return len(self._data)

    @property
    def bit_size(self) -> int:
        """Logical bit length."""
        return self.size

    def __len__(self) -> int:
        return self.size

    def ensure_byte_capacity(self, num_bytes: int) -> None:
        """
        Grow the buffer to at least num_bytes, zero-filling new bytes.

        Never shrinks the buffer.
        """
        missing = num_bytes - len(self._data)
        if missing > 0:
            logger.debug("Growing buffer from %d to %d bytes", len(self._data), num_bytes)
            self._data.extend(bytes(missing))

    def _touch(self, end_bit: int) -> None:
        # Grow to cover bits [0, end_bit) and raise size to match
        self.ensure_byte_capacity((end_bit + BITS_PER_BYTE - 1) // BITS_PER_BYTE)
        if end_bit > self.size:
            self.size = end_bit

    # ------------------------------------------------------------------
    # Single bit and byte access
    # ------------------------------------------------------------------

    def get(self, pos: int) -> bool:
        """
        Get bit value at position.

        Args:
            pos: Bit position (0 = LSB of byte 0)

        Returns:
            True if the bit is 1

        Raises:
            OutOfRangeError: If pos is outside [0, size)
        """
        if pos < 0 or pos >= self.size:
            raise OutOfRangeError(f"Bit position {pos} out of range [0, {self.size})")

        return bool(self._data[pos // BITS_PER_BYTE] & (1 << (pos % BITS_PER_BYTE)))

    def set(self, pos: int, val: bool) -> None:
        """
        Set bit value at position, growing the buffer if needed.

        Args:
            pos: Bit position (0 = LSB of byte 0)
            val: Truthy for 1, falsy for 0

        Raises:
            InvalidArgumentError: If pos is negative
        """
        if pos < 0:
            raise InvalidArgumentError(f"Bit position must not be negative, got {pos}")

        self.set_bit(pos // BITS_PER_BYTE, pos % BITS_PER_BYTE, val)

    def set_bit(self, byte_index: int, bit_offset: int, val: bool) -> None:
        """
        Set one bit of one byte, growing the buffer if needed.

        Args:
            byte_index: Byte index (0 = lowest byte)
            bit_offset: Bit within the byte, 0 (LSB) to 7 (MSB)
            val: Truthy for 1, falsy for 0

        Raises:
            InvalidArgumentError: If bit_offset is outside [0, 7] or
                byte_index is negative
        """
        if bit_offset < 0 or bit_offset > 7:
            raise InvalidArgumentError(f"Bit offset {bit_offset} out of range [0, 7]")
        if byte_index < 0:
            raise InvalidArgumentError(
                f"Byte index must not be negative, got {byte_index}"
            )

        self._touch(byte_index * BITS_PER_BYTE + bit_offset + 1)

        if val:
            self._data[byte_index] |= 1 << bit_offset
        else:
            self._data[byte_index] &= ~(1 << bit_offset) & 0xFF

    def active(self, pos: int, bit_offset: "int | None" = None) -> None:
        """
        Set a bit to 1.

        With one argument pos is a bit position; with two it is a byte
        index and bit_offset selects the bit within that byte.
        """
        if bit_offset is None:
            self.set(pos, True)
        else:
            self.set_bit(pos, bit_offset, True)

    def passive(self, pos: int, bit_offset: "int | None" = None) -> None:
        """Set a bit to 0. Arguments as for active()."""
        if bit_offset is None:
            self.set(pos, False)
        else:
            self.set_bit(pos, bit_offset, False)

    def get_nth_byte(self, nth: int) -> int:
        """
        Get one byte as an unsigned value.

        Raises:
            OutOfRangeError: If nth is outside [0, byte_size)
        """
        if nth < 0 or nth >= len(self._data):
            raise OutOfRangeError(
                f"Byte index {nth} out of range [0, {len(self._data)})"
            )
        return self._data[nth]

    def set_nth_byte(self, nth: int, value: int) -> "BitArray":
        """
        Overwrite one byte, growing the buffer if needed.

        Only the low 8 bits of value are stored, so -1 writes 0xFF.

        Returns:
            self, for chaining

        Raises:
            InvalidArgumentError: If nth is negative
        """
        if nth < 0:
            raise InvalidArgumentError(f"Byte index must not be negative, got {nth}")

        self._touch((nth + 1) * BITS_PER_BYTE)
        self._data[nth] = value & 0xFF
        return self

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------

    @staticmethod
    def _check_range(start: int, end: int) -> None:
        if start < 0:
            raise InvalidArgumentError(f"Range start must not be negative, got {start}")
        if start >= end:
            raise InvalidArgumentError(
                f"Range start {start} must be less than end {end}"
            )

    def set_range(self, start: int, end: int, val: bool) -> None:
        """
        Set every bit in [start, end).

        Whole interior bytes are written directly; the first and last
        bytes are updated through boundary masks.

        Args:
            start: First bit position (inclusive)
            end: Last bit position (exclusive)
            val: Truthy for 1, falsy for 0

        Raises:
            InvalidArgumentError: If start < 0 or start >= end
        """
        self._check_range(start, end)

        start_index = start // BITS_PER_BYTE
        end_index = (end - 1) // BITS_PER_BYTE
        self._touch(end)

        # Bits [start % 8, 7] and [0, (end - 1) % 8]
        start_mask = (0xFF << (start % BITS_PER_BYTE)) & 0xFF
        end_mask = 0xFF >> (7 - (end - 1) % BITS_PER_BYTE)

        if start_index == end_index:
            self._apply_mask(start_index, start_mask & end_mask, val)
            return

        fill = 0xFF if val else 0x00
        for i in range(start_index + 1, end_index):
            self._data[i] = fill

        self._apply_mask(start_index, start_mask, val)
        self._apply_mask(end_index, end_mask, val)

    def _apply_mask(self, index: int, mask: int, val: bool) -> None:
        if val:
            self._data[index] |= mask
        else:
            self._data[index] &= ~mask & 0xFF

    def active_range(self, start: int, end: int) -> None:
        """Set every bit in [start, end) to 1."""
        self.set_range(start, end, True)

    def passive_range(self, start: int, end: int) -> None:
        """Set every bit in [start, end) to 0."""
        self.set_range(start, end, False)

    def set_range_byte(self, start: int, end: int, value: int) -> None:
        """
        Write the same byte to every byte index in [start, end).

        Raises:
            InvalidArgumentError: If start < 0 or start >= end
        """
        self._check_range(start, end)

        self._touch(end * BITS_PER_BYTE)
        value &= 0xFF
        for i in range(start, end):
            self._data[i] = value

    def get_range_byte(self, start: int, end: int) -> bytes:
        """
        Copy the bytes in [start, end).

        Raises:
            InvalidArgumentError: If start < 0 or start >= end
            OutOfRangeError: If end is beyond the buffer
        """
        self._check_range(start, end)
        if end > len(self._data):
            raise OutOfRangeError(
                f"Byte range end {end} exceeds buffer length {len(self._data)}"
            )
        return bytes(self._data[start:end])

    # ------------------------------------------------------------------
    # Logic
    # ------------------------------------------------------------------

    def apply(self, other: "BitArray", op) -> "BitArray":
        """
        Combine other into this array in place.

        Exactly byte_size bytes are updated; the buffer is not grown.
        Bytes beyond the end of other count as zero.

        Args:
            other: Second operand
            op: Operation name ("and", "or", "xor", "nor", "xnor",
                "nand") or one of the byte functions in flexbits.logic

        Returns:
            self

        Raises:
            InvalidArgumentError: If op is unknown
        """
        func = logic.resolve(op)
        logger.debug(
            "Applying %s over %d bytes (operand %d bytes)",
            func.__name__,
            len(self._data),
            len(other._data),
        )
        logic.combine(self._data, other._data, func)
        return self

    def and_(self, other: "BitArray") -> "BitArray":
        """
        Bitwise AND with other, in place.

            10001111 and
            01001010
          = 00001010
        """
        return self.apply(other, logic.and_byte)

    def or_(self, other: "BitArray") -> "BitArray":
        """
        Bitwise OR with other, in place.

            10001111 or
            01001010
          = 11001111
        """
        return self.apply(other, logic.or_byte)

    def xor(self, other: "BitArray") -> "BitArray":
        """
        Bitwise XOR with other, in place.

            10001111 xor
            01001010
          = 11000101
        """
        return self.apply(other, logic.xor_byte)

    def nor(self, other: "BitArray") -> "BitArray":
        """
        Bitwise NOR with other, in place.

            10001111 nor
            01001010
          = 00110000
        """
        return self.apply(other, logic.nor_byte)

    def xnor(self, other: "BitArray") -> "BitArray":
        """
        Bitwise XNOR with other, in place.

            10001111 xnor
            01001010
          = 00111010
        """
        return self.apply(other, logic.xnor_byte)

    def nand(self, other: "BitArray") -> "BitArray":
        """
        Bitwise NAND with other, in place.

            10001111 nand
            01001010
          = 11110101
        """
        return self.apply(other, logic.nand_byte)

    def not_(self) -> "BitArray":
        """
        Invert every byte of the buffer in place.

        Padding bits above size in the last byte are inverted too, so
        calling this twice restores the buffer exactly.

        Returns:
            self
        """
        logic.complement(self._data)
        return self

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Return a copy of the whole buffer, byte 0 first."""
        return bytes(self._data)

    def to_text(self, encoding: str = DEFAULT_ENCODING) -> str:
        """Decode the buffer as text, byte 0 first."""
        return codec.decode_text(self._data, encoding)

    def to_int(self, bits: int) -> int:
        """
        Read the low bytes as a signed little-endian integer.

        Args:
            bits: Width in bits (8, 16, 32 or 64)

        Returns:
            Signed integer; bytes missing from a short buffer count as zero
        """
        return codec.bytes_to_int(self._data, bits)

    def to_int8(self) -> int:
        return self.to_int(8)

    def to_int16(self) -> int:
        return self.to_int(16)

    def to_int32(self) -> int:
        return self.to_int(32)

    def to_int64(self) -> int:
        return self.to_int(64)

    def render(self) -> str:
        """
        Render as binary digits, highest byte first.

        Example: bytes [0x01, 0x02] render as "00000010 00000001".
        """
        return codec.render(self._data)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BitArray(size={self.size}, {self.render()!r})"

    def equals(self, other: "BitArray") -> bool:
        """
        Check equality with another bit array.

        Equal means same logical size and identical buffers.
        """
        return self.size == other.size and self._data == other._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self.equals(other)

    # Mutable: unhashable
    __hash__ = None
