"""
Byte-wise logical operations.

Each operation is a pure function of two unsigned bytes returning an
unsigned byte. ``combine`` folds an operand buffer into a target buffer
with one of them; ``complement`` inverts a buffer in place.

Operands shorter than the target are treated as zero-extended: missing
high-order bytes contribute 0x00.
"""

from flexbits.errors import InvalidArgumentError

BYTE_MASK = 0xFF


def and_byte(a: int, b: int) -> int:
    """Return a AND b."""
    return a & b


def or_byte(a: int, b: int) -> int:
    """Return a OR b."""
    return a | b


def xor_byte(a: int, b: int) -> int:
    """Return a XOR b."""
    return a ^ b


def nor_byte(a: int, b: int) -> int:
    """Return NOT (a OR b)."""
    return ~(a | b) & BYTE_MASK


def xnor_byte(a: int, b: int) -> int:
    """Return NOT (a XOR b)."""
    return ~(a ^ b) & BYTE_MASK


def nand_byte(a: int, b: int) -> int:
    """Return NOT (a AND b)."""
    return ~(a & b) & BYTE_MASK


OPERATIONS = {
    "and": and_byte,
    "or": or_byte,
    "xor": xor_byte,
    "nor": nor_byte,
    "xnor": xnor_byte,
    "nand": nand_byte,
}


def resolve(op):
    """
    Look up a byte operation.

    Args:
        op: Operation name (key of OPERATIONS) or one of the byte functions

    Returns:
        The byte function

    Raises:
        InvalidArgumentError: If op is not a known operation
    """
    if isinstance(op, str):
        try:
            return OPERATIONS[op.lower()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown logic operation: {op!r}") from None

    if op in OPERATIONS.values():
        return op

    raise InvalidArgumentError(f"Unknown logic operation: {op!r}")


def combine(target: bytearray, operand: bytes, op) -> None:
    """
    Combine operand into target in place, one byte at a time.

    Exactly len(target) bytes are written; target is never extended.

    Args:
        target: Buffer to update (modified in place)
        operand: Second operand, zero-extended if shorter than target
        op: Byte function applied as op(target[i], operand[i])
    """
    operand_len = len(operand)

    for i in range(len(target)):
        other = operand[i] if i < operand_len else 0x00
        target[i] = op(target[i], other)


def complement(target: bytearray) -> None:
    """Invert every byte of target in place, including padding bits."""
    for i in range(len(target)):
        target[i] = ~target[i] & BYTE_MASK
