import string

from ff3fpe.exceptions import (InvalidDigitForRadix, InvalidRadix, ValueTooLarge)

# -----------------------------
# Radix Alphabet
# -----------------------------
ALPHABET = string.digits + string.ascii_lowercase

def alphabet(radix: int) -> str:
    """The first `radix` symbols of 0-9a-z."""
    if radix < 2 or radix > len(ALPHABET):
        raise InvalidRadix(f"radix {radix} must be between 2 and {len(ALPHABET)}, inclusive")
    return ALPHABET[:radix]

def reverse(s):
    return s[::-1]

# -----------------------------
# String <-> Integer
# -----------------------------
def to_integer(digits: str, radix: int) -> int:
    """
    Interpret a digit string in the given radix, most significant digit first.

    Equivalent to NUM_radix(X) in SP 800-38G. Python integers are arbitrary
    precision, so strings of any length convert exactly without splitting
    them into machine-word sized chunks. The empty string is zero.

    Args:
        digits: Symbols drawn from alphabet(radix)
        radix: Base of the representation (2..36)

    Returns:
        Nonnegative integer value

    Raises:
        InvalidDigitForRadix: If a symbol is outside alphabet(radix)
    """
    symbols = alphabet(radix)
    num = 0
    for char in digits:
        digit = symbols.find(char)
        if digit < 0:
            raise InvalidDigitForRadix(f"char {char!r} not found in radix {radix} alphabet {symbols}")
        num = num * radix + digit
    return num

def to_digit_string(value: int, radix: int, length: int) -> str:
    """
    Render `value` in `radix`, left-padded with zeros to exactly `length` symbols.

    Equivalent to STR^m_radix(x) in SP 800-38G.

    Raises:
        ValueTooLarge: If the value needs more than `length` symbols
    """
    if value < 0:
        raise ValueError(f"cannot encode negative value {value}")
    symbols = alphabet(radix)
    out = []
    while value:
        value, digit = divmod(value, radix)
        out.append(symbols[digit])
    if len(out) > length:
        raise ValueTooLarge(f"value needs {len(out)} digits in radix {radix}, only {length} available")
    return "".join(reversed(out)).rjust(length, symbols[0])

# -----------------------------
# Integer -> Bytes
# -----------------------------
def to_fixed_bytes(n: int) -> bytes:
    """Minimal big-endian unsigned encoding; zero encodes to b''."""
    if n < 0:
        raise ValueError(f"cannot encode negative value {n}")
    return n.to_bytes((n.bit_length() + 7) // 8, "big")
