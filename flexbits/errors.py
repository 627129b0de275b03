"""
Exceptions raised by flexbits.

Both subclass the matching builtin so callers catching ``ValueError`` or
``IndexError`` keep working.
"""


class InvalidArgumentError(ValueError):
    """An argument is outside the domain an operation accepts."""


class OutOfRangeError(IndexError):
    """A read addressed a bit or byte beyond the container."""
