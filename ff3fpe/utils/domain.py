from ff3fpe.exceptions import (
    InvalidDigitForRadix, InvalidDomainBounds, InvalidKeyLength, InvalidMessageLength, InvalidRadix
)
from ff3fpe.models import FF3Params
from ff3fpe.utils.radix import ALPHABET

# -----------------------------
# Domain Validation
# -----------------------------
def length_bounds(radix: int, params: FF3Params = FF3Params()) -> tuple[int, int]:
    """
    Derive the supported message length range [minLen, maxLen] for a radix.

    minLen is the smallest m with radix^m >= domain_min (one million), and maxLen
    is 2 * floor(log_radix(2^96)). Both are computed with exact integer powers
    rather than floating point logarithms.

    radix 10: 6..56, radix 26: 5..40, radix 36: 4..36

    Raises:
        InvalidDomainBounds: If minLen < 2 or maxLen < minLen
    """
    if radix < 2:
        raise InvalidRadix(f"radix {radix} has no finite length bounds")

    min_len = 0
    while radix ** min_len < params.domain_min:
        min_len += 1

    half = 0
    while radix ** (half + 1) <= 2 ** params.max_half_bits:
        half += 1
    max_len = 2 * half

    if min_len < 2 or max_len < min_len:
        raise InvalidDomainBounds(
            f"minLen {min_len} or maxLen {max_len} invalid for radix {radix}, adjust your radix"
        )
    return min_len, max_len

def key_variant(key: bytes, params: FF3Params = FF3Params()) -> int:
    """Map a 16/24/32-byte key to its AES strength in bits."""
    if len(key) not in params.key_lengths:
        raise InvalidKeyLength(
            f"key length is {len(key)} bytes but must be 128, 192, or 256 bits"
        )
    return len(key) * 8

def check_radix(radix, params: FF3Params = FF3Params()):
    if not isinstance(radix, int) or isinstance(radix, bool):
        raise InvalidRadix(f"radix must be an integer, got {radix!r}")
    if radix < params.min_radix or radix > params.max_radix:
        raise InvalidRadix(
            f"radix must be between {params.min_radix} and {params.max_radix}, inclusive"
        )

def check_message_length(n: int, min_len: int, max_len: int):
    if n < min_len or n > max_len:
        raise InvalidMessageLength(
            f"message length {n} is not within min {min_len} and max {max_len} bounds"
        )

def check_alphabet(text: str, radix: int):
    """Reject any symbol that is not one of the first `radix` characters of 0-9a-z."""
    symbols = ALPHABET[:radix]
    for char in text:
        if char not in symbols:
            raise InvalidDigitForRadix(
                f"message symbol {char!r} is not supported in the current radix {radix}"
            )
