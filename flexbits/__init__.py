"""
flexbits - growable bit array backed by a byte buffer.

Bit 0 is the least-significant bit of byte 0. The buffer grows on demand
when a setter addresses a position beyond the current capacity and never
shrinks.
"""

__version__ = "1.0.0"

from flexbits.bitarray import BitArray
from flexbits.errors import InvalidArgumentError, OutOfRangeError

__all__ = ["BitArray", "InvalidArgumentError", "OutOfRangeError", "__version__"]
