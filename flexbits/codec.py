"""
Conversions between byte buffers and integers, text and digit strings.

Integers are stored little-endian: byte 0 holds the least-significant
byte. Digit strings are written most-significant bit first, so the
rightmost digit is bit 0. Rendering groups the buffer into 8-digit
chunks from the highest byte down to byte 0.

Encoded text is the one exception to little-endian ordering: the encoded
bytes are used in encoding order, byte 0 being the first encoded byte.
"""

from flexbits.errors import InvalidArgumentError

BITS_PER_BYTE = 8
DEFAULT_ENCODING = "utf-8"

# Supported integer widths in bits -> bytes
INT_WIDTHS = {8: 1, 16: 2, 32: 4, 64: 8}


def _width_bytes(bits: int) -> int:
    try:
        return INT_WIDTHS[bits]
    except KeyError:
        raise InvalidArgumentError(f"Unsupported integer width: {bits}") from None


def int_to_bytes(value: int, bits: int) -> bytearray:
    """
    Encode a signed integer as a little-endian buffer.

    Args:
        value: Integer to encode
        bits: Width in bits (8, 16, 32 or 64)

    Returns:
        Buffer of exactly bits // 8 bytes

    Raises:
        InvalidArgumentError: If the width is unsupported or value does not
            fit in a signed integer of that width
    """
    num_bytes = _width_bytes(bits)
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if value < low or value > high:
        raise InvalidArgumentError(
            f"Value {value} out of range for int{bits} [{low}, {high}]"
        )
    return bytearray(value.to_bytes(num_bytes, "little", signed=True))


def bytes_to_int(data: bytes, bits: int) -> int:
    """
    Decode the low bytes of a buffer as a signed little-endian integer.

    Bytes missing from a short buffer count as zero.
    """
    num_bytes = _width_bytes(bits)
    chunk = bytes(data[:num_bytes]).ljust(num_bytes, b"\x00")
    return int.from_bytes(chunk, "little", signed=True)


def parse_digits(digits: str) -> tuple:
    """
    Parse a string of binary digits.

    Whitespace anywhere in the string is ignored. The rightmost digit
    becomes bit 0.

    Args:
        digits: String of '0', '1' and whitespace

    Returns:
        (buffer, bit_size) tuple

    Raises:
        InvalidArgumentError: On any other character
    """
    cleaned = []
    for offset, char in enumerate(digits):
        if char in "01":
            cleaned.append(char)
        elif not char.isspace():
            raise InvalidArgumentError(
                f"Invalid binary digit {char!r} at offset {offset}"
            )

    num_bits = len(cleaned)
    data = bytearray((num_bits + BITS_PER_BYTE - 1) // BITS_PER_BYTE)

    # Walk from the right: the last digit is bit 0
    for pos, char in enumerate(reversed(cleaned)):
        if char == "1":
            data[pos // BITS_PER_BYTE] |= 1 << (pos % BITS_PER_BYTE)

    return data, num_bits


def render(data: bytes) -> str:
    """
    Render a buffer as space-separated 8-digit groups.

    The highest byte comes first; each byte is written MSB first.
    An empty buffer renders as an empty string.
    """
    return " ".join(format(byte, "08b") for byte in reversed(data))


def encode_text(text: str, encoding: str = DEFAULT_ENCODING) -> bytearray:
    """Encode text into a buffer, keeping encoding order."""
    return bytearray(text.encode(encoding))


def decode_text(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode a buffer produced by encode_text."""
    return bytes(data).decode(encoding)
