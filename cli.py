#!/usr/bin/env python3
"""
flexbits command line interface.

Evaluates bit array operations and prints the result as binary digit
groups, highest byte first.

Usage:
    python cli.py render <digits>
    python cli.py <and|or|xor|nor|xnor|nand> <digits> <digits>
    python cli.py not <digits>
    python cli.py int <8|16|32|64> <value>
    python cli.py text <string> [encoding]

Examples:
    python cli.py render "111000 10100101"        # 00111000 10100101
    python cli.py and 10001111 01001010           # 00001010
    python cli.py int 16 257                      # 00000001 00000001
"""

import sys

from flexbits import BitArray, InvalidArgumentError, OutOfRangeError, __version__
from flexbits.codec import DEFAULT_ENCODING, INT_WIDTHS
from flexbits.logic import OPERATIONS


def print_version() -> None:
    """Print version information."""
    print(f"flexbits {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"flexbits {__version__} - growable bit array")
    print("=" * 40)
    print()
    print("Usage:")
    print(f"  {prog_name} render <digits>")
    print(f"  {prog_name} <and|or|xor|nor|xnor|nand> <digits> <digits>")
    print(f"  {prog_name} not <digits>")
    print(f"  {prog_name} int <8|16|32|64> <value>")
    print(f"  {prog_name} text <string> [encoding]")
    print()
    print("Options:")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Digits are '0'/'1' characters; whitespace is ignored and the")
    print("rightmost digit is bit 0. Binary operations update the first")
    print("operand over its own byte length, padding the second with zeros.")
    print()
    print("Examples:")
    print(f'  {prog_name} render "111000 10100101"')
    print(f"  {prog_name} xor 10001111 01001010")
    print(f"  {prog_name} int 64 72057594037927937")
    print(f"  {prog_name} text hello latin-1")
    print()


def usage_error(message: str, usage: str) -> int:
    """Report a usage error and return the failure status."""
    print(f"Error: {message}", file=sys.stderr)
    print(f"Usage: {usage}", file=sys.stderr)
    return 1


def do_logic(op: str, left: str, right: str) -> int:
    """Apply a binary operation to two digit strings and print the result."""
    result = BitArray.parse(left).apply(BitArray.parse(right), op)
    print(result.render())
    return 0


def do_not(digits: str) -> int:
    """Complement a digit string and print the result."""
    print(BitArray.parse(digits).not_().render())
    return 0


def do_int(width: str, value: str) -> int:
    """Encode an integer of the given width and print the result."""
    try:
        bits = int(width)
        number = int(value, 0)
    except ValueError:
        print("Error: width and value must be integers", file=sys.stderr)
        return 1

    print(BitArray.from_int(number, bits).render())
    return 0


def do_text(text: str, encoding: str) -> int:
    """Encode text and print the result."""
    try:
        bits = BitArray.from_text(text, encoding)
    except LookupError:
        print(f"Error: Unknown encoding: {encoding}", file=sys.stderr)
        return 1
    except UnicodeEncodeError as e:
        print(f"Error: Cannot encode text as {encoding}: {e}", file=sys.stderr)
        return 1

    print(bits.render())
    return 0


def dispatch(prog_name: str, args: list) -> int:
    """Run one command. args excludes the program name."""
    command = args[0].lower()
    operands = args[1:]

    if command == "render":
        if len(operands) != 1:
            return usage_error("render requires 1 argument", f"{prog_name} render <digits>")
        print(BitArray.parse(operands[0]).render())
        return 0

    if command in OPERATIONS:
        if len(operands) != 2:
            return usage_error(
                f"{command} requires 2 arguments",
                f"{prog_name} {command} <digits> <digits>",
            )
        return do_logic(command, operands[0], operands[1])

    if command == "not":
        if len(operands) != 1:
            return usage_error("not requires 1 argument", f"{prog_name} not <digits>")
        return do_not(operands[0])

    if command == "int":
        if len(operands) != 2:
            return usage_error(
                "int requires 2 arguments",
                f"{prog_name} int <{'|'.join(str(w) for w in INT_WIDTHS)}> <value>",
            )
        return do_int(operands[0], operands[1])

    if command == "text":
        if len(operands) not in (1, 2):
            return usage_error(
                "text requires 1 or 2 arguments",
                f"{prog_name} text <string> [encoding]",
            )
        encoding = operands[1] if len(operands) == 2 else DEFAULT_ENCODING
        return do_text(operands[0], encoding)

    print(f"Error: Unknown command: {args[0]}", file=sys.stderr)
    return 1


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    # Check for help flag or no arguments
    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    try:
        return dispatch(prog_name, args[1:])
    except (InvalidArgumentError, OutOfRangeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
