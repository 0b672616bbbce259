from ff3fpe.exceptions import (InvalidHexEncoding, InvalidTweakLength)
from ff3fpe.models import FF3Params

# -----------------------------
# Tweak Helpers
# -----------------------------
def decode_hex(value: str, what: str) -> bytes:
    """Decode a hex string, naming `what` in the error."""
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError):
        raise InvalidHexEncoding(f"{what} must be a hex string, got {value!r}") from None

def decode_tweak(tweak: str, params: FF3Params = FF3Params()) -> bytes:
    """
    Decode a hex tweak and canonicalize it to 64 bits.

    Args:
        tweak: 14 (FF3-1) or 16 (FF3) hex characters
        params: FF3 parameters

    Returns:
        8-byte canonical tweak
    """
    return expand(decode_hex(tweak, "tweak"), params)

def expand(tweak: bytes, params: FF3Params = FF3Params()) -> bytes:
    """
    Canonicalize a 56 or 64-bit tweak to the 64-bit layout used by the rounds.

    A 64-bit tweak passes through unchanged. A 56-bit FF3-1 tweak T is laid out as
    Tl = T[0..27] || 0000 and Tr = T[32..55] || T[28..31] || 0000, i.e. the low
    nibble of byte 3 moves to the high nibble of byte 7.

    Cryptographic principles:
    - FF3-1 tweak: the 56-bit form closes the Durak-Vaudenay attack on FF3
      by fixing 8 tweak bits to zero in both round halves
    """
    if len(tweak) == params.tweak_len:
        return bytes(tweak)
    if len(tweak) != params.tweak_len_ff3_1:
        raise InvalidTweakLength(
            f"tweak length {len(tweak)} invalid: tweak must be "
            f"{params.tweak_len_ff3_1 * 8} or {params.tweak_len * 8} bits"
        )
    tweak64 = bytearray(params.tweak_len)
    tweak64[0:3] = tweak[0:3]
    tweak64[3] = tweak[3] & 0xF0
    tweak64[4:7] = tweak[4:7]
    tweak64[7] = (tweak[3] & 0x0F) << 4
    return bytes(tweak64)

def split(tweak: bytes) -> tuple[bytes, bytes]:
    """Split a canonical tweak into (Tl, Tr)."""
    half = len(tweak) // 2
    return tweak[:half], tweak[half:]
