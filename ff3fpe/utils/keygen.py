import secrets

from ff3fpe.exceptions import InvalidKeyLength
from ff3fpe.models import FF3Params

def generate_key(bits: int = 256, params: FF3Params = FF3Params()) -> str:
    """
    Generate a random AES key for FF3 as a hex string.

    Args:
        bits: 128, 192 or 256

    Returns:
        Hex key accepted by FF3Cipher

    Cryptographic principles:
    - CSPRNG: keys come from the secrets module (os.urandom)
    """
    if bits % 8 or bits // 8 not in params.key_lengths:
        raise InvalidKeyLength(f"key size {bits} invalid: must be 128, 192, or 256 bits")
    return secrets.token_bytes(bits // 8).hex()

def generate_tweak(ff3_1: bool = True, params: FF3Params = FF3Params()) -> str:
    """Random 56-bit (FF3-1) or 64-bit (FF3) tweak as hex."""
    length = params.tweak_len_ff3_1 if ff3_1 else params.tweak_len
    return secrets.token_bytes(length).hex()
